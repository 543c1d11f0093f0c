"""Write-only run reports: Parquet diff log and JSON summary."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from redstone_sim.config.constants import FLUSH_THRESHOLD
from redstone_sim.domain.blocks import block_fields
from redstone_sim.domain.trace import SimResponse
from redstone_sim.io.paths import diff_log_path, logs_dir, run_summary_path
from redstone_sim.io.schemas import (
    BLOCK_FIELD_COLUMNS,
    DIFF_LOG_SCHEMA,
    DIFF_LOG_SCHEMA_VERSION,
    RUN_SUMMARY_SCHEMA_VERSION,
)
from redstone_sim.simulation.summary import RunSummary


def _empty_diff_columns() -> dict[str, list[object]]:
    return {field.name: [] for field in DIFF_LOG_SCHEMA}


def flush_diff_columns(
    diff_columns: dict[str, list[object]],
    path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated diff rows to Parquet and clear in-memory buffers."""
    if not diff_columns["tick"]:
        return writer
    table = pa.Table.from_pydict(diff_columns, schema=DIFF_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(path, DIFF_LOG_SCHEMA)
    writer.write_table(table)
    for values in diff_columns.values():
        values.clear()
    return writer


def write_diff_log(
    response: SimResponse,
    path: Path,
    flush_threshold: int = FLUSH_THRESHOLD,
) -> Path:
    """Stream every change of `response` into a Parquet file at `path`.

    One row per changed block per tick. A run without diffs still produces a
    file holding an empty table.
    """
    if flush_threshold < 1:
        raise ValueError("flush_threshold must be >= 1")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    columns = _empty_diff_columns()
    writer: pq.ParquetWriter | None = None
    try:
        for diff in response.diffs:
            for change in diff.changes:
                values = block_fields(change.block)
                columns["tick"].append(diff.tick)
                columns["x"].append(change.position.x)
                columns["y"].append(change.position.y)
                columns["z"].append(change.position.z)
                columns["block_type"].append(change.block.TYPE)
                for name, _ in BLOCK_FIELD_COLUMNS:
                    value = values.get(name)
                    columns[name].append(value.value if isinstance(value, Enum) else value)
                if len(columns["tick"]) >= flush_threshold:
                    writer = flush_diff_columns(columns, path, writer)
        writer = flush_diff_columns(columns, path, writer)
        if writer is None:
            pq.write_table(DIFF_LOG_SCHEMA.empty_table(), path)
    finally:
        if writer is not None:
            writer.close()
    return path


def write_run_report(
    response: SimResponse,
    summary: RunSummary,
    out_dir: Path,
    write_diff_log_file: bool = True,
) -> dict[str, Path]:
    """Persist the summary JSON (and optionally the diff log) under `out_dir`."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written: dict[str, Path] = {}
    if write_diff_log_file:
        logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
        written["diff_log"] = write_diff_log(response, diff_log_path(out_dir))

    payload = {
        "schema_version": RUN_SUMMARY_SCHEMA_VERSION,
        "diff_log_schema_version": DIFF_LOG_SCHEMA_VERSION,
        **summary.to_dict(),
    }
    summary_path = run_summary_path(out_dir)
    summary_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2))
    written["summary"] = summary_path
    return written
