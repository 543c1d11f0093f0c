"""Configuration dataclasses for command-line runs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING

from redstone_sim.config.constants import MAX_TICK_BUDGET

if TYPE_CHECKING:
    from redstone_sim.domain.trace import SimRequest

__all__ = ["LOG_LEVELS", "RunConfig"]

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RunConfig:
    """Run-time overrides and report settings for one CLI invocation.

    `ticks` and `early_exit` override the request file when set.
    """

    ticks: int | None = None
    early_exit: bool | None = None
    out_dir: Path | None = None
    write_diff_log: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.ticks is not None and not 0 <= self.ticks <= MAX_TICK_BUDGET:
            raise ValueError(f"ticks must be in [0, {MAX_TICK_BUDGET}]")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if self.write_diff_log and self.out_dir is None:
            raise ValueError("write_diff_log requires out_dir")

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def apply(self, request: SimRequest) -> SimRequest:
        """Return `request` with this config's overrides applied."""
        ticks = request.ticks if self.ticks is None else self.ticks
        early_exit = request.early_exit if self.early_exit is None else self.early_exit
        return replace(request, ticks=ticks, early_exit=early_exit)
