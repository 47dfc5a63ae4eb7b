"""
Orchestrator for running workloads in-process, profiling execution, and persisting results.

Usage (example from CLI):
    from workload_service.orchestrator import run_workloads

    results = run_workloads(workload_names=["users", "primes"], runs=5, warmup=True)
    print(results)

Outputs are saved to `results/` by default:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import json
import platform
import statistics
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from workload_service.config import get_settings
from workload_service.utils.logging import get_logger
from workload_service.utils.profiler import ProfileStats, profile_block
from workload_service.workloads.abstract import Workload, WorkloadResult
from workload_service.workloads.primes import PrimeBenchmarkWorkload
from workload_service.workloads.users import UserGenerationWorkload

log = get_logger(__name__)


def _round_float(value: float, decimals: int = 2) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _summary(values: List[float], decimals: int = 2) -> dict:
    return {
        "median": _round_float(statistics.median(values), decimals),
        "mean": _round_float(statistics.mean(values), decimals),
        "stddev": _round_float(statistics.stdev(values), decimals) if len(values) > 1 else 0.0,
        "min": _round_float(min(values), decimals),
        "max": _round_float(max(values), decimals),
    }


def _aggregate_runs(run_results: List[dict]) -> dict:
    """
    Aggregate multiple runs into a statistical summary.

    Failed runs are excluded from the statistics but still counted in `failed_runs`.
    """
    succeeded = [r for r in run_results if not r.get("error")]
    aggregated: dict = {
        "items": succeeded[0]["items"] if succeeded else 0,
        "failed_runs": len(run_results) - len(succeeded),
    }
    if not succeeded:
        return aggregated

    aggregated["duration_seconds"] = _summary([r["duration_seconds"] for r in succeeded], 4)
    aggregated["throughput_items_per_sec"] = _summary(
        [r["throughput_items_per_sec"] for r in succeeded]
    )

    cpu_percents = [r["cpu_percent"] for r in succeeded if r.get("cpu_percent")]
    if cpu_percents:
        aggregated["cpu_percent"] = _summary(cpu_percents, decimals=1)

    peak_rss_values = [r["peak_rss_bytes"] for r in succeeded if r.get("peak_rss_bytes")]
    if peak_rss_values:
        aggregated["peak_rss_bytes"] = {
            "median": int(statistics.median(peak_rss_values)),
            "mean": int(statistics.mean(peak_rss_values)),
            "stddev": int(statistics.stdev(peak_rss_values)) if len(peak_rss_values) > 1 else 0,
            "min": min(peak_rss_values),
            "max": max(peak_rss_values),
        }

    return aggregated


def _workload_factories() -> Dict[str, Callable[[], Workload]]:
    """Registry of available workloads."""
    return {
        UserGenerationWorkload.name: UserGenerationWorkload,
        PrimeBenchmarkWorkload.name: PrimeBenchmarkWorkload,
    }


def available_workloads() -> List[str]:
    """List available workload names."""
    return sorted(_workload_factories().keys())


def _resolve_workload(name: str) -> Workload:
    factories = _workload_factories()
    if name not in factories:
        raise ValueError(f"Unknown workload '{name}'. Available: {', '.join(factories)}")
    return factories[name]()


def _persist_results(payload: dict, results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    for path in (latest_path, archive_path):
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})
    return latest_path


def _profiled_execute(workload: Workload) -> dict:
    log.info(f"[WORKLOAD START] {workload.name}", extra={"workload": workload.name})
    with profile_block(workload.name) as stats:
        try:
            result = workload.execute()
            log.info(
                f"[WORKLOAD SUCCESS] {workload.name}",
                extra={"workload": workload.name, "items": result.get("items")},
            )
        except Exception as exc:  # noqa: BLE001 - record the failure and keep going
            log.exception(f"[WORKLOAD FAILED] {workload.name}", extra={"workload": workload.name})
            result = WorkloadResult(error=str(exc), items=0, duration_seconds=0.0)

    return _merge_result(result, stats)


def _merge_result(result: WorkloadResult, stats: ProfileStats) -> dict:
    """
    Merge a workload result with profiler stats.

    Timing reported by the workload wins (it brackets only the measured work);
    the profiler fills whatever the workload left out.
    """
    merged = dict(result)
    merged.setdefault("items", 0)
    if merged.get("duration_seconds") is None:
        merged["duration_seconds"] = stats.duration_seconds
    if merged.get("throughput_items_per_sec") is None:
        merged["throughput_items_per_sec"] = (
            merged["items"] / merged["duration_seconds"] if merged["duration_seconds"] else 0.0
        )
    merged["duration_seconds"] = _round_float(merged["duration_seconds"], 4)
    merged["throughput_items_per_sec"] = _round_float(merged["throughput_items_per_sec"])

    if merged.get("peak_rss_bytes") is None:
        merged["peak_rss_bytes"] = stats.peak_rss_bytes
    if merged.get("cpu_percent") is None:
        merged["cpu_percent"] = _round_float(stats.cpu_percent, 1) if stats.cpu_percent else None
    else:
        merged["cpu_percent"] = _round_float(merged["cpu_percent"], 1)

    merged["profile"] = {
        "label": stats.label,
        "start_ts": _round_float(stats.start_ts, 3),
        "end_ts": _round_float(stats.end_ts, 3),
        "duration_seconds": _round_float(stats.duration_seconds, 4),
        "peak_rss_bytes": stats.peak_rss_bytes,
        "cpu_percent": _round_float(stats.cpu_percent, 1) if stats.cpu_percent else None,
    }
    return merged


def run_workloads(
    workload_names: Optional[Iterable[str]] = None,
    results_dir: Optional[Path | str] = None,
    persist: bool = True,
    warmup: bool = False,
    runs: int = 1,
) -> List[dict]:
    """
    Run one or more workloads and optionally persist the results.

    Parameters
    ----------
    workload_names : iterable[str] | None
        Workload names to execute. If None or ["all"], executes all available.
    results_dir : Path | str | None
        Directory to store JSON artifacts. Defaults to settings.results_dir.
    persist : bool
        Whether to write results to disk.
    warmup : bool
        Whether to run each workload once, unmeasured, before the measured runs.
    runs : int
        Number of measured runs per workload.

    Returns
    -------
    List[dict]
        One result per workload. With runs > 1 the entry holds aggregated
        statistics and the individual runs under `individual_runs`.
    """
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")

    settings = get_settings()
    names = list(workload_names) if workload_names is not None else ["all"]
    if len(names) == 1 and names[0] == "all":
        names = available_workloads()

    # Validate every name before running anything.
    for name in names:
        _resolve_workload(name)

    total_global_runs = len(names) * runs
    current_run = 0

    results: List[dict] = []
    for name in names:
        log.info(f"[WORKLOAD] {name.upper()}", extra={"workload": name})

        if warmup:
            log.info(f"[WARMUP] Starting warmup run for {name}", extra={"workload": name})
            try:
                _resolve_workload(name).execute()
            except Exception as exc:  # noqa: BLE001 - a failed warmup must not stop measurement
                log.warning(f"[WARMUP] Failed for {name}", extra={"workload": name, "error": str(exc)})

        run_results: List[dict] = []
        for run_num in range(1, runs + 1):
            current_run += 1
            result = _profiled_execute(_resolve_workload(name))
            result["workload"] = name
            result["run"] = run_num
            run_results.append(result)
            log.info(
                f"[RUN {current_run}/{total_global_runs}] Completed {name}",
                extra={
                    "workload": name,
                    "run": run_num,
                    "items": result.get("items"),
                    "duration": result.get("duration_seconds"),
                },
            )

        if runs > 1:
            aggregated = _aggregate_runs(run_results)
            aggregated["workload"] = name
            aggregated["runs"] = runs
            aggregated["individual_runs"] = run_results
            results.append(aggregated)
        else:
            results.extend(run_results)

    payload = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "runtime": {
            "implementation": platform.python_implementation(),
            "version": platform.python_version(),
            "app_env": settings.app_env,
        },
        "workloads": names,
        "results": results,
    }

    if persist:
        _persist_results(payload, Path(results_dir or settings.results_dir))

    log.info(
        f"[ORCHESTRATOR COMPLETE] {len(names)} workload(s) executed",
        extra={"workloads": names},
    )
    return results


__all__ = [
    "available_workloads",
    "run_workloads",
]
