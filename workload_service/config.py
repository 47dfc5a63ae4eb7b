"""
Configuration settings for the workload service.

Uses Pydantic Settings to load environment variables for the HTTP listener,
logging, and the local benchmark harness. Dataset size and prime bound are
fixed constants of the workloads and deliberately not configurable here.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # HTTP listener
    api_host: str = Field("127.0.0.1", alias="API_HOST")
    api_port: int = Field(5003, alias="API_PORT")
    api_workers: int = Field(1, ge=1, alias="API_WORKERS")

    # Benchmark
    benchmark_concurrency: int = Field(2, ge=1, alias="BENCHMARK_CONCURRENCY")
    results_dir: str = Field("results", alias="RESULTS_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
