"""
HTTP boundary for the workload service.

The cheap routes are plain ``def`` handlers that FastAPI runs on its worker
threadpool. ``/benchmark`` is async: it waits for one of
``BENCHMARK_CONCURRENCY`` limiter tokens on the event loop, then runs the
synchronous prime count on a worker thread, so queued benchmark requests hold
no thread and cannot starve the other routes.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional

import anyio
import anyio.to_thread
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from workload_service import __version__
from workload_service.config import Settings, get_settings
from workload_service.domain.models import BenchmarkResult, User
from workload_service.utils.logging import configure_logging, get_logger
from workload_service.workloads import primes, users

log = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(level=settings.log_level, json_logs=settings.log_json)
        log.info(
            "Workload service started",
            extra={"app_env": settings.app_env, "benchmark_concurrency": settings.benchmark_concurrency},
        )
        app.state.benchmark_slots = anyio.CapacityLimiter(settings.benchmark_concurrency)
        yield
        log.info("Workload service stopped")

    app = FastAPI(title="Workload Service", version=__version__, lifespan=lifespan)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        log.exception(
            "Unhandled error", extra={"path": request.url.path, "method": request.method}
        )
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})

    @app.get("/users", response_model=List[User], name="get_users")
    def get_users() -> List[User]:
        return list(users.generate(users.USER_COUNT))

    @app.get("/benchmark", response_model=BenchmarkResult, name="benchmark")
    async def benchmark(request: Request) -> BenchmarkResult:
        slots: anyio.CapacityLimiter = request.app.state.benchmark_slots
        return await anyio.to_thread.run_sync(primes.run, limiter=slots)

    @app.get("/health", name="health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    return app


__all__ = ["create_app"]
