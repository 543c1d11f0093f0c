"""Tests for the Parquet diff log and run report writers."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from redstone_sim.domain.trace import SimRequest
from redstone_sim.io.schemas import (
    DIFF_LOG_SCHEMA,
    DIFF_LOG_SCHEMA_VERSION,
    RUN_SUMMARY_SCHEMA_VERSION,
)
from redstone_sim.simulation.engine import simulate
from redstone_sim.simulation.persistence import write_diff_log, write_run_report
from redstone_sim.simulation.summary import summarize_response


class TestWriteDiffLog:
    def test_rows_follow_schema(self, tmp_path: Path, lever_to_lamp: SimRequest) -> None:
        path = write_diff_log(simulate(lever_to_lamp), tmp_path / "diffs.parquet")
        table = pq.read_table(path)
        assert table.schema.equals(DIFF_LOG_SCHEMA)
        rows = table.to_pylist()
        assert len(rows) == 2
        assert rows[0]["tick"] == 1
        assert rows[0]["block_type"] == "dust"
        assert (rows[0]["x"], rows[0]["y"], rows[0]["z"]) == (1, 0, 0)
        assert rows[0]["power"] == 15
        assert rows[0]["on"] is None
        assert rows[0]["facing"] is None
        assert rows[1]["tick"] == 2
        assert rows[1]["block_type"] == "lamp"
        assert rows[1]["on"] is True
        assert rows[1]["power"] is None

    def test_facing_stored_as_wire_label(
        self, tmp_path: Path, mixed_circuit: SimRequest
    ) -> None:
        table = pq.read_table(write_diff_log(simulate(mixed_circuit), tmp_path / "d.parquet"))
        rows = table.to_pylist()
        assert len(rows) == 14
        (torch_row,) = [row for row in rows if row["block_type"] == "torch"]
        assert torch_row["tick"] == 6
        assert torch_row["facing"] == "down"
        assert torch_row["lit"] is False
        unused = {"on", "power", "ticks_remaining", "delay", "powered", "output"}
        assert all(torch_row[name] is None for name in unused)

    def test_small_flush_threshold_writes_row_groups(
        self, tmp_path: Path, lever_to_lamp: SimRequest
    ) -> None:
        path = write_diff_log(simulate(lever_to_lamp), tmp_path / "d.parquet", flush_threshold=1)
        assert pq.ParquetFile(path).metadata.num_row_groups == 2
        assert pq.read_table(path).num_rows == 2

    def test_run_without_diffs_writes_empty_table(
        self, tmp_path: Path, lever_to_lamp: SimRequest
    ) -> None:
        path = write_diff_log(
            simulate(replace(lever_to_lamp, ticks=0)), tmp_path / "nested" / "d.parquet"
        )
        table = pq.read_table(path)
        assert table.num_rows == 0
        assert table.schema.equals(DIFF_LOG_SCHEMA)

    def test_invalid_flush_threshold(self, tmp_path: Path, lever_to_lamp: SimRequest) -> None:
        with pytest.raises(ValueError, match="flush_threshold"):
            write_diff_log(simulate(lever_to_lamp), tmp_path / "d.parquet", flush_threshold=0)


class TestWriteRunReport:
    def test_writes_summary_and_diff_log(
        self, tmp_path: Path, lever_to_lamp: SimRequest
    ) -> None:
        response = simulate(lever_to_lamp)
        summary = summarize_response(response, len(lever_to_lamp.blocks))
        written = write_run_report(response, summary, tmp_path / "run")

        assert written["diff_log"] == tmp_path / "run" / "logs" / "diff_log.parquet"
        assert written["summary"] == tmp_path / "run" / "run_summary.json"
        assert pq.read_table(written["diff_log"]).num_rows == 2

        payload = json.loads(written["summary"].read_text())
        assert payload["schema_version"] == RUN_SUMMARY_SCHEMA_VERSION
        assert payload["diff_log_schema_version"] == DIFF_LOG_SCHEMA_VERSION
        assert payload["terminated"] == "stable"
        assert payload["total_changes"] == 2
        assert payload["last_change_tick"] == 2

    def test_diff_log_can_be_skipped(self, tmp_path: Path, lever_to_lamp: SimRequest) -> None:
        response = simulate(lever_to_lamp)
        summary = summarize_response(response, len(lever_to_lamp.blocks))
        written = write_run_report(response, summary, tmp_path, write_diff_log_file=False)
        assert set(written) == {"summary"}
        assert not (tmp_path / "logs").exists()
