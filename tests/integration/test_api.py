"""End-to-end tests of the HTTP routes through FastAPI's TestClient."""

from __future__ import annotations

import os
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from workload_service.api.app import create_app
from workload_service.config import Settings
from workload_service.workloads import primes
from workload_service.workloads.users import USER_COUNT

PRIMES_BELOW_SMALL_BOUND = 168


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_users_returns_full_dataset_in_order(client: TestClient):
    response = client.get("/users")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == USER_COUNT
    assert [u["id"] for u in body[:3]] == [1, 2, 3]
    assert body[-1]["id"] == USER_COUNT

    first = body[0]
    assert first["firstName"] == "Linda"
    assert first["email"] == "linda.lopez1@example.com"
    assert first["address"]["zipCode"] == "10001"
    assert first["company"]["salary"] == 40_001
    assert first["company"]["startDate"] == "2022-01-02T00:00:00Z"
    assert first["dateOfBirth"] == "1994-01-02T00:00:00Z"
    assert first["metadata"]["ReferralCode"] == "REF000001"
    assert first["tags"] == ["Premium", "Enterprise", "Verified", "Active"]


def test_users_is_idempotent(client: TestClient):
    assert client.get("/users").content == client.get("/users").content


def test_benchmark_reports_metrics(client: TestClient, small_prime_bound: int):
    response = client.get("/benchmark")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"executionTimeMs", "primesFound", "processId", "workingSetMB"}
    assert body["primesFound"] == PRIMES_BELOW_SMALL_BOUND
    assert body["executionTimeMs"] >= 0
    assert body["processId"] == os.getpid()
    assert body["workingSetMB"] >= 0


def test_benchmark_concurrency_is_bounded(
    test_settings: Settings, small_prime_bound: int, monkeypatch: pytest.MonkeyPatch
):
    settings = test_settings.model_copy(update={"benchmark_concurrency": 2})
    lock = threading.Lock()
    active = 0
    peak = 0
    real_run = primes.run

    def _tracking_run():
        nonlocal active, peak
        with lock:
            active += 1
            peak = max(peak, active)
        try:
            threading.Event().wait(0.05)
            return real_run()
        finally:
            with lock:
                active -= 1

    monkeypatch.setattr(primes, "run", _tracking_run)

    with TestClient(create_app(settings)) as client:
        with ThreadPoolExecutor(max_workers=6) as pool:
            responses = list(pool.map(lambda _: client.get("/benchmark"), range(6)))

    assert all(r.status_code == 200 for r in responses)
    assert 1 <= peak <= 2


QUEUED_BENCHMARKS = 45


def test_health_answers_while_benchmarks_are_queued(
    test_settings: Settings, small_prime_bound: int, monkeypatch: pytest.MonkeyPatch
):
    settings = test_settings.model_copy(update={"benchmark_concurrency": 1})
    started = threading.Event()
    release = threading.Event()
    real_run = primes.run

    def _blocking_run():
        started.set()
        release.wait(timeout=30)
        return real_run()

    monkeypatch.setattr(primes, "run", _blocking_run)

    with TestClient(create_app(settings)) as client:
        with ThreadPoolExecutor(max_workers=QUEUED_BENCHMARKS + 1) as pool:
            pending = [pool.submit(client.get, "/benchmark") for _ in range(QUEUED_BENCHMARKS)]
            try:
                assert started.wait(timeout=5)
                health = pool.submit(client.get, "/health")
                assert health.result(timeout=5).status_code == 200
            finally:
                release.set()
            responses = [future.result(timeout=60) for future in pending]

    assert all(r.status_code == 200 for r in responses)
    assert all(r.json()["primesFound"] == PRIMES_BELOW_SMALL_BOUND for r in responses)


def test_unhandled_error_returns_generic_500(
    test_settings: Settings, monkeypatch: pytest.MonkeyPatch
):
    def _explode():
        raise RuntimeError("internal detail")

    monkeypatch.setattr(primes, "run", _explode)

    with TestClient(create_app(test_settings), raise_server_exceptions=False) as client:
        response = client.get("/benchmark")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}


@pytest.mark.slow
def test_benchmark_full_run_matches_oracle(client: TestClient):
    body = client.get("/benchmark").json()
    assert body["primesFound"] == primes.PRIMES_BELOW_BOUND
