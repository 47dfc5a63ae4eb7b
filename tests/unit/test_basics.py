import hashlib
import json
from pathlib import Path
from time import sleep

from rich.console import Console

from scripts import export_users
from workload_service import config, reporter
from workload_service.utils import profiler


def test_get_settings_defaults(monkeypatch):
    for name in ("API_HOST", "API_PORT", "BENCHMARK_CONCURRENCY", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    config.get_settings.cache_clear()
    try:
        settings = config.get_settings()
        assert settings.api_host == "127.0.0.1"
        assert settings.api_port == 5003
        assert settings.benchmark_concurrency > 0
        assert settings.log_json is False
    finally:
        config.get_settings.cache_clear()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("BENCHMARK_CONCURRENCY", "4")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = config.Settings()

    assert settings.benchmark_concurrency == 4
    assert settings.log_json is True


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.duration_seconds >= 0.05
    assert stats.peak_rss_bytes is not None and stats.peak_rss_bytes > 0
    assert isinstance(stats.cpu_percent, float)


def test_profile_block_traces_allocations_when_enabled():
    with profiler.profile_block("alloc", enable_tracemalloc=True) as stats:
        _ = [str(i) for i in range(10_000)]
    assert stats.peak_traced_bytes is not None and stats.peak_traced_bytes > 0


def test_container_resources_prefer_environment(monkeypatch):
    monkeypatch.setenv("BENCHMARK_CPU_LIMIT", "2.0")
    monkeypatch.setenv("BENCHMARK_MEMORY_LIMIT", "512MB")

    assert reporter.get_container_resources() == {"cpus": "2.0", "memory": "512MB"}


def test_print_results_renders_workload_rows():
    console = Console(record=True, width=160)
    reporter.print_results(
        [
            {"workload": "users", "items": 10_000, "duration_seconds": 0.25, "peak_rss_bytes": 0},
            {"workload": "primes", "items": 0, "duration_seconds": 0.0, "error": "boom"},
        ],
        console=console,
    )
    output = console.export_text()
    assert "users" in output
    assert "10,000" in output
    assert "error: boom" in output


def test_export_users_writes_json_and_returns_digest(tmp_path: Path):
    output = tmp_path / "nested" / "users.json"

    digest = export_users._write_export(output, count=3)

    payload = output.read_bytes()
    assert digest == hashlib.sha256(payload).hexdigest()
    users = json.loads(payload)
    assert [u["id"] for u in users] == [1, 2, 3]
    assert users[0]["firstName"] == "Linda"
    assert export_users._write_export(tmp_path / "again.json", count=3) == digest


def test_cli_lists_workloads():
    from typer.testing import CliRunner

    from workload_service.main import app

    result = CliRunner().invoke(app, ["run", "--workload", "list"])

    assert result.exit_code == 0
    assert "primes, users" in result.output


def test_cli_rejects_unknown_workload():
    from typer.testing import CliRunner

    from workload_service.main import app

    result = CliRunner().invoke(app, ["run", "--workload", "nope", "--no-persist"])

    assert result.exit_code == 2


def test_cli_serve_passes_explicit_zero_port(monkeypatch):
    from typer.testing import CliRunner

    from workload_service import main

    captured = {}
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: captured.update(kwargs))

    result = CliRunner().invoke(main.app, ["serve", "--port", "0", "--host", "0.0.0.0"])

    assert result.exit_code == 0
    assert captured["port"] == 0
    assert captured["host"] == "0.0.0.0"
    assert captured["factory"] is True
