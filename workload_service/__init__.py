"""
Workload Service - a reproducible HTTP benchmark workload.

Serves two fixed workloads that can be timed across runtime configurations:

- ``GET /users``: 10,000 deterministic synthetic user records
- ``GET /benchmark``: a trial-division prime count with timing and memory metrics

The same workloads can be run in-process through the orchestrator for local
profiling, without the HTTP layer in the measurement.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from workload_service.config import Settings, get_settings
from workload_service.orchestrator import available_workloads, run_workloads
from workload_service.utils.logging import configure_logging, get_logger
from workload_service.utils.profiler import ProfileStats, profile_block
from workload_service.workloads.abstract import (
    AbstractWorkload,
    Workload,
    WorkloadResult,
)

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Orchestration
    "available_workloads",
    "run_workloads",
    # Workload abstractions
    "Workload",
    "AbstractWorkload",
    "WorkloadResult",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "profile_block",
]
