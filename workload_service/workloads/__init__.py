"""
Workloads package for the workload service.

Re-exports the workload interfaces and the two concrete workloads so callers
can import from `workload_service.workloads` directly.
"""

from workload_service.workloads.abstract import (
    AbstractWorkload,
    Workload,
    WorkloadResult,
)
from workload_service.workloads.primes import PrimeBenchmarkWorkload
from workload_service.workloads.users import UserGenerationWorkload

__all__ = [
    # Abstracts
    "AbstractWorkload",
    "Workload",
    "WorkloadResult",
    # Concrete workloads
    "PrimeBenchmarkWorkload",
    "UserGenerationWorkload",
]
