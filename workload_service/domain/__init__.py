"""
Domain package for the workload service.

Exports the value records served over HTTP and the fixed lookup tables the
record generator draws from. Keep this package free of I/O.
"""

from workload_service.domain.models import (
    Address,
    BenchmarkResult,
    Company,
    User,
    UserPreferences,
)

__all__ = [
    "Address",
    "BenchmarkResult",
    "Company",
    "User",
    "UserPreferences",
]
