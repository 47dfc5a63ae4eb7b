"""
Utilities package for the workload service.

Exports shared helpers for logging and profiling.
Keep this package lightweight and free of domain-specific logic.
"""

from workload_service.utils.logging import configure_logging, get_logger
from workload_service.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
