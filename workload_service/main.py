from __future__ import annotations

import json
import sys
from typing import Optional

import typer
import uvicorn

from workload_service.config import get_settings
from workload_service.orchestrator import available_workloads, run_workloads
from workload_service.reporter import print_results
from workload_service.utils.logging import configure_logging

app = typer.Typer(help="Workload Service CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | listen={settings.api_host}:{settings.api_port} "
        f"workers={settings.api_workers} | benchmark_concurrency={settings.benchmark_concurrency} "
        f"| results_dir={settings.results_dir}"
    )


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Override API_HOST."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Override API_PORT."),
) -> None:
    """
    Start the HTTP listener.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    uvicorn.run(
        "workload_service.api.app:create_app",
        factory=True,
        host=host if host is not None else settings.api_host,
        port=port if port is not None else settings.api_port,
        workers=settings.api_workers,
        log_config=None,
    )


@app.command()
def run(
    workload: str = typer.Option(
        "all",
        "--workload",
        "-w",
        help="Workload to run (users, primes, all) or 'list' to show available names.",
    ),
    runs: int = typer.Option(1, "--runs", "-n", min=1, help="Measured runs per workload."),
    warmup: bool = typer.Option(False, "--warmup", help="Run each workload once before measuring."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
    no_persist: bool = typer.Option(False, "--no-persist", help="Do not write results to disk."),
) -> None:
    """
    Run workloads in-process via the orchestrator and report the results.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    if workload == "list":
        typer.echo("Available workloads: " + ", ".join(available_workloads()))
        return

    try:
        results = run_workloads(
            workload_names=[workload], runs=runs, warmup=warmup, persist=not no_persist
        )
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(json.dumps(results, indent=2))
    else:
        print_results(results)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
