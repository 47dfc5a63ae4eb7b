"""
Workload interfaces and result contracts for the local benchmark harness.

Concrete workloads (record generation, prime counting) implement the
AbstractWorkload ABC and return a WorkloadResult TypedDict so the orchestrator
and reporter can treat them uniformly.
"""

from __future__ import annotations

import abc
from typing import Any, Dict, Optional, Protocol, TypedDict, runtime_checkable


class WorkloadResult(TypedDict, total=False):
    """
    Minimal metrics contract returned by workloads.

    Fields are optional; the orchestrator fills timing and memory from the
    profiler when a workload does not report them itself.
    """

    items: int
    duration_seconds: float
    throughput_items_per_sec: float
    peak_rss_bytes: Optional[int]
    cpu_percent: Optional[float]
    error: Optional[str]
    notes: Optional[str]
    extra: Dict[str, Any]


@runtime_checkable
class Workload(Protocol):
    """
    Common interface all harness workloads implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the work performed.
    """

    name: str
    description: str

    def execute(self) -> WorkloadResult:
        """
        Perform the fixed amount of work once and return metrics.
        """
        ...


class AbstractWorkload(abc.ABC):
    """
    ABC helper for class-based workloads.

    Subclasses set `name` and `description` and implement `execute`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def execute(self) -> WorkloadResult:  # pragma: no cover - interface only
        """Run the workload and return metrics."""
        raise NotImplementedError


__all__ = [
    "WorkloadResult",
    "Workload",
    "AbstractWorkload",
]
