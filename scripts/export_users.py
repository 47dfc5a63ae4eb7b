"""
Export script for the synthetic user dataset.

Writes the exact payload served by ``GET /users`` to a JSON file and prints its
SHA-256 digest, so outputs from different runtimes or builds can be compared
without diffing megabytes of JSON.
"""

from __future__ import annotations

import hashlib
import sys
import time
from pathlib import Path
from typing import List

import typer
from pydantic import TypeAdapter

from workload_service.domain.models import User
from workload_service.workloads.users import USER_COUNT, generate

app = typer.Typer(help="Export the synthetic user dataset as JSON and print its digest.")

_USERS_ADAPTER = TypeAdapter(List[User])


def _serialize_users(count: int) -> bytes:
    return _USERS_ADAPTER.dump_json(list(generate(count)), by_alias=True)


def _write_export(output: Path, count: int = USER_COUNT) -> str:
    payload = _serialize_users(count)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(payload)
    return hashlib.sha256(payload).hexdigest()


@app.command()
def main(
    output: Path = typer.Option(
        Path("results/users.json"),
        "--output",
        "-o",
        help="Destination JSON file.",
    ),
    expect: str | None = typer.Option(
        None,
        "--expect",
        help="Expected SHA-256 digest; exit non-zero on mismatch.",
    ),
) -> None:
    """
    Export the fixed user dataset and report its digest.
    """
    start = time.perf_counter()
    digest = _write_export(output)
    duration = time.perf_counter() - start
    typer.echo(f"Wrote {USER_COUNT:,} users -> {output} in {duration:.2f}s")
    typer.echo(f"sha256={digest}")

    if expect and expect.lower() != digest:
        typer.echo(f"Digest mismatch: expected {expect}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
