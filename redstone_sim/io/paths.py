"""Path construction helpers for run report output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def diff_log_path(out_dir: Path) -> Path:
    """Return path to the per-tick diff log Parquet file."""
    return logs_dir(out_dir) / "diff_log.parquet"


def run_summary_path(out_dir: Path) -> Path:
    """Return path to the run summary JSON file."""
    return out_dir / "run_summary.json"
