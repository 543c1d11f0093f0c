"""Typed request and response records for one simulation run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from redstone_sim.config.constants import DEFAULT_EARLY_EXIT, MAX_TICK_BUDGET
from redstone_sim.domain.connectivity import PlacedBlock

BlockChange = PlacedBlock
"""A block's state right after it changed, keyed by its position."""


class Termination(str, Enum):
    """Why a run stopped; values are the wire labels."""

    STABLE = "stable"
    MAX_TICKS_REACHED = "max_ticks_reached"


@dataclass(frozen=True)
class SimRequest:
    """Tick budget, t=0 placements and the early-exit switch."""

    ticks: int
    blocks: tuple[PlacedBlock, ...]
    early_exit: bool = DEFAULT_EARLY_EXIT

    def __post_init__(self) -> None:
        if isinstance(self.ticks, bool) or not isinstance(self.ticks, int):
            raise ValueError("ticks must be an integer value")
        if not 0 <= self.ticks <= MAX_TICK_BUDGET:
            raise ValueError(f"ticks must be in [0, {MAX_TICK_BUDGET}]")
        if not isinstance(self.early_exit, bool):
            raise ValueError("early_exit must be a boolean value")
        seen = set()
        for placed in self.blocks:
            if placed.position in seen:
                raise ValueError(f"duplicate block at {placed.position}")
            seen.add(placed.position)


@dataclass(frozen=True)
class TickDiff:
    """Blocks that changed during one tick, in ascending position order."""

    tick: int
    changes: tuple[BlockChange, ...]


@dataclass(frozen=True)
class SimResponse:
    diffs: tuple[TickDiff, ...]
    terminated: Termination
