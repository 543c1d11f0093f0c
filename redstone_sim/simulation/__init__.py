"""Simulation engine: tick stepping, termination, summaries, and run reports."""

from redstone_sim.simulation.engine import TickEngine, simulate
from redstone_sim.simulation.persistence import (
    flush_diff_columns,
    write_diff_log,
    write_run_report,
)
from redstone_sim.simulation.summary import RunSummary, summarize_response
from redstone_sim.simulation.termination import QuiescenceDetector

__all__ = [
    "QuiescenceDetector",
    "RunSummary",
    "TickEngine",
    "flush_diff_columns",
    "simulate",
    "summarize_response",
    "write_diff_log",
    "write_run_report",
]
