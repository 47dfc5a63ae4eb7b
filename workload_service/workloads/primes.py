"""
CPU-bound prime counting benchmark.

Counts primes below a fixed bound with plain trial division, unoptimized
so the amount of work is the same on every runtime. The count
itself is a fixed oracle (78 498 primes below 1 000 000).
"""

from __future__ import annotations

import os
import time

import psutil

from workload_service.domain.models import BenchmarkResult
from workload_service.utils.logging import get_logger
from workload_service.workloads.abstract import AbstractWorkload, WorkloadResult

log = get_logger(__name__)

PRIME_BOUND = 1_000_000
PRIMES_BELOW_BOUND = 78_498

UNKNOWN_PROCESS_ID = -1
UNKNOWN_WORKING_SET_MB = 0.0


def is_prime(value: int) -> bool:
    """Trial division by every d >= 2 with d * d <= value."""
    if value < 2:
        return False
    divisor = 2
    while divisor * divisor <= value:
        if value % divisor == 0:
            return False
        divisor += 1
    return True


def count_primes_below(bound: int) -> int:
    return sum(1 for value in range(2, bound) if is_prime(value))


def _process_id() -> int:
    # Sentinel path for platforms that expose no process id.
    try:
        return os.getpid()
    except OSError:
        log.warning("Process id unavailable", exc_info=True)
        return UNKNOWN_PROCESS_ID


def _working_set_mb() -> float:
    """Resident set size of this process in MiB, 0.0 when it cannot be read."""
    try:
        rss = psutil.Process().memory_info().rss
    except (psutil.Error, OSError):
        log.warning("Process memory unavailable", exc_info=True)
        return UNKNOWN_WORKING_SET_MB
    return rss / (1024 * 1024)


def run() -> BenchmarkResult:
    """
    Count primes below PRIME_BOUND and report timing and memory.
    """
    start_time = time.perf_counter()
    primes_found = count_primes_below(PRIME_BOUND)
    elapsed_ms = int((time.perf_counter() - start_time) * 1000)

    result = BenchmarkResult(
        execution_time_ms=max(elapsed_ms, 0),
        primes_found=primes_found,
        process_id=_process_id(),
        working_set_mb=_working_set_mb(),
    )
    log.info(
        "Prime benchmark finished",
        extra={"primes_found": primes_found, "execution_time_ms": result.execution_time_ms},
    )
    return result


class PrimeBenchmarkWorkload(AbstractWorkload):
    """
    Run the prime benchmark once and report its own timing.
    """

    name: str = "primes"
    description: str = f"Trial-division prime count below {PRIME_BOUND:,}."

    def execute(self) -> WorkloadResult:
        result = run()
        duration_seconds = result.execution_time_ms / 1000.0

        return WorkloadResult(
            items=result.primes_found,
            duration_seconds=duration_seconds,
            throughput_items_per_sec=(
                result.primes_found / duration_seconds if duration_seconds > 0 else 0.0
            ),
            notes=f"Candidates checked: {PRIME_BOUND - 2:,}.",
            extra=result.model_dump(by_alias=True),
        )


__all__ = [
    "PRIME_BOUND",
    "PRIMES_BELOW_BOUND",
    "PrimeBenchmarkWorkload",
    "count_primes_below",
    "is_prime",
    "run",
]
