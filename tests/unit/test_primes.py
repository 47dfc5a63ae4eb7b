from __future__ import annotations

import logging
import os

import psutil
import pytest

from workload_service.workloads import primes
from workload_service.workloads.primes import (
    PRIMES_BELOW_BOUND,
    PrimeBenchmarkWorkload,
    count_primes_below,
    is_prime,
    run,
)

PRIMES_BELOW_SMALL_BOUND = 168


@pytest.mark.parametrize("value", [2, 3, 5, 7, 97, 7919])
def test_is_prime_accepts_primes(value):
    assert is_prime(value)


@pytest.mark.parametrize("value", [0, 1, 4, 9, 25, 49, 7917, 1_000_000])
def test_is_prime_rejects_non_primes(value):
    assert not is_prime(value)


@pytest.mark.parametrize(
    ("bound", "expected"),
    [(0, 0), (2, 0), (3, 1), (10, 4), (100, 25), (10_000, 1_229)],
)
def test_count_primes_below_is_strict(bound, expected):
    assert count_primes_below(bound) == expected


def test_run_reports_process_metrics(small_prime_bound):
    result = run()

    assert result.primes_found == PRIMES_BELOW_SMALL_BOUND
    assert result.execution_time_ms >= 0
    assert result.process_id == os.getpid()
    assert result.working_set_mb > 0


def test_run_degrades_to_sentinel_when_memory_unavailable(small_prime_bound, monkeypatch):
    class _BrokenProcess:
        def memory_info(self):
            raise psutil.AccessDenied()

    monkeypatch.setattr(primes.psutil, "Process", _BrokenProcess)

    result = run()

    assert result.primes_found == PRIMES_BELOW_SMALL_BOUND
    assert result.working_set_mb == 0.0


def test_run_degrades_to_sentinel_when_pid_unavailable(small_prime_bound, monkeypatch):
    def _no_pid() -> int:
        raise OSError("no pid")

    # LogRecord reads the pid as well while process logging is on.
    monkeypatch.setattr(logging, "logProcesses", False)
    monkeypatch.setattr(primes.os, "getpid", _no_pid)

    assert run().process_id == -1


def test_result_serializes_with_wire_names(small_prime_bound):
    payload = run().model_dump(by_alias=True)
    assert set(payload) == {"executionTimeMs", "primesFound", "processId", "workingSetMB"}
    assert isinstance(payload["workingSetMB"], float)


def test_workload_exposes_benchmark_result_in_extra(small_prime_bound):
    result = PrimeBenchmarkWorkload().execute()
    assert result["items"] == PRIMES_BELOW_SMALL_BOUND
    assert result["extra"]["primesFound"] == PRIMES_BELOW_SMALL_BOUND


@pytest.mark.slow
def test_full_run_matches_prime_count_oracle():
    result = run()
    assert result.primes_found == PRIMES_BELOW_BOUND == 78_498
    assert result.execution_time_ms >= 0
    assert result.working_set_mb >= 0
