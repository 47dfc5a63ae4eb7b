from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

# cgroup v1 reports "no limit" as a page-aligned LONG_MAX.
_CGROUP_V1_UNLIMITED = 9223372036854771712


def _format_memory(mem_bytes: int) -> str:
    mem_gb = mem_bytes / (1024**3)
    if mem_gb >= 1:
        return f"{mem_gb:.1f}GB"
    return f"{mem_bytes / (1024**2):.0f}MB"


def _read_first_line(path: str) -> Optional[str]:
    try:
        with open(path, "r") as f:
            return f.read().strip()
    except (FileNotFoundError, PermissionError):
        return None


def get_container_resources() -> Dict[str, Optional[str]]:
    """
    Get container resource constraints.

    Reads from environment variables first, then cgroup v2, then cgroup v1.
    Returns dict with 'cpus' and 'memory' keys.
    """
    resources: Dict[str, Optional[str]] = {
        "cpus": os.environ.get("BENCHMARK_CPU_LIMIT") or None,
        "memory": os.environ.get("BENCHMARK_MEMORY_LIMIT") or None,
    }

    if resources["cpus"] is None:
        content = _read_first_line("/sys/fs/cgroup/cpu.max")
        parts = content.split() if content else []
        if len(parts) == 2 and parts[0] != "max":
            try:
                resources["cpus"] = f"{int(parts[0]) / int(parts[1]):.1f}"
            except (ValueError, ZeroDivisionError):
                pass

    if resources["cpus"] is None:
        quota = _read_first_line("/sys/fs/cgroup/cpu/cpu.cfs_quota_us")
        period = _read_first_line("/sys/fs/cgroup/cpu/cpu.cfs_period_us")
        try:
            if quota and period and int(quota) > 0:
                resources["cpus"] = f"{int(quota) / int(period):.1f}"
        except (ValueError, ZeroDivisionError):
            pass

    if resources["memory"] is None:
        content = _read_first_line("/sys/fs/cgroup/memory.max")
        if content and content != "max":
            try:
                resources["memory"] = _format_memory(int(content))
            except ValueError:
                pass

    if resources["memory"] is None:
        content = _read_first_line("/sys/fs/cgroup/memory/memory.limit_in_bytes")
        try:
            if content and int(content) < _CGROUP_V1_UNLIMITED:
                resources["memory"] = _format_memory(int(content))
        except ValueError:
            pass

    return resources


def print_results(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render workload results as a rich table.

    Handles both single-run results and aggregated multi-run results.
    Displays container resource constraints when available.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    resources = get_container_resources()
    resource_parts = []
    if resources["cpus"]:
        resource_parts.append(f"CPU: {resources['cpus']} cores")
    if resources["memory"]:
        resource_parts.append(f"Memory: {resources['memory']}")

    is_aggregated = isinstance(results[0].get("runs"), int) and results[0]["runs"] > 1

    title = "Workload Results"
    if resource_parts:
        title = f"{title}\n[dim]Container Resources: {' │ '.join(resource_parts)}[/dim]"

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Workload", style="cyan", no_wrap=True)
    table.add_column("Items", justify="right", style="magenta")

    if is_aggregated:
        table.add_column("Runs", justify="right", style="blue")
        table.add_column(
            "Duration (ms)\n[dim](Median ± StdDev)[/dim]", justify="right", style="green"
        )
        table.add_column("Peak Memory (MB)\n[dim](Median)[/dim]", justify="right", style="yellow")
        table.add_column("CPU %\n[dim](Median)[/dim]", justify="right", style="red")
    else:
        table.add_column("Duration (ms)", justify="right", style="green")
        table.add_column("Peak Memory (MB)", justify="right", style="yellow")
        table.add_column("CPU %", justify="right", style="red")
    table.add_column("Status", style="dim")

    for res in results:
        workload = res.get("workload", "Unknown")
        items = f"{res.get('items', 0):,}"

        if is_aggregated:
            failed = res.get("failed_runs", 0)
            status = f"{failed} failed" if failed else "ok"
            duration = res.get("duration_seconds")
            if duration is None:
                table.add_row(workload, items, str(res["runs"]), "N/A", "N/A", "N/A", status)
                continue
            duration_str = f"{duration['median'] * 1000:.1f} ± {duration['stddev'] * 1000:.1f}"

            mem_str = "N/A"
            if "peak_rss_bytes" in res:
                mem_str = f"{res['peak_rss_bytes']['median'] / (1024 * 1024):.2f}"

            cpu_str = "N/A"
            if "cpu_percent" in res:
                cpu_str = f"{res['cpu_percent']['median']:.1f}"

            table.add_row(workload, items, str(res["runs"]), duration_str, mem_str, cpu_str, status)
        else:
            status = f"error: {res['error']}" if res.get("error") else "ok"
            duration_str = f"{res.get('duration_seconds', 0.0) * 1000:.1f}"
            mem_str = f"{(res.get('peak_rss_bytes') or 0) / (1024 * 1024):.2f}"
            cpu_str = f"{res.get('cpu_percent') or 0.0:.1f}"

            table.add_row(workload, items, duration_str, mem_str, cpu_str, status)

    console.print(table)


__all__ = ["get_container_resources", "print_results"]
