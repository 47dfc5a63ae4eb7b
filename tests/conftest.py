"""
Pytest configuration for the workload service.

Provides fixtures for:
- Settings overrides for tests
- The full user dataset, generated once per session
- A FastAPI test client
- Shrinking the prime bound where a full benchmark run is not the point
"""

from __future__ import annotations

from typing import Generator, Tuple

import pytest
from fastapi.testclient import TestClient

from workload_service.api.app import create_app
from workload_service.config import Settings
from workload_service.domain.models import User
from workload_service.workloads import primes
from workload_service.workloads.users import USER_COUNT, generate

SMALL_PRIME_BOUND = 1_000


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        log_level="DEBUG",
        benchmark_concurrency=1,
        results_dir="results-test",
    )


@pytest.fixture(scope="session")
def full_dataset() -> Tuple[User, ...]:
    """
    The complete fixed-size dataset, built once and shared read-only.
    """
    return generate(USER_COUNT)


@pytest.fixture
def small_prime_bound(monkeypatch: pytest.MonkeyPatch) -> int:
    """
    Count primes below 1,000 instead of 1,000,000 for the duration of a test.
    """
    monkeypatch.setattr(primes, "PRIME_BOUND", SMALL_PRIME_BOUND)
    return SMALL_PRIME_BOUND


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """
    Test client bound to a fresh app; the context manager runs the lifespan hooks.
    """
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client
