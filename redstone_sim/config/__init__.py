"""Configuration layer: constants and typed config dataclasses."""

from redstone_sim.config.constants import (
    BLOCK_TYPES,
    DEFAULT_EARLY_EXIT,
    FLUSH_THRESHOLD,
    MAX_POWER,
    MAX_REPEATER_DELAY,
    MAX_TICK_BUDGET,
    MAX_TIMER_TICKS,
    MIN_POWER,
    MIN_REPEATER_DELAY,
)
from redstone_sim.config.types import LOG_LEVELS, RunConfig

__all__ = [
    "BLOCK_TYPES",
    "DEFAULT_EARLY_EXIT",
    "FLUSH_THRESHOLD",
    "LOG_LEVELS",
    "MAX_POWER",
    "MAX_REPEATER_DELAY",
    "MAX_TICK_BUDGET",
    "MAX_TIMER_TICKS",
    "MIN_POWER",
    "MIN_REPEATER_DELAY",
    "RunConfig",
]
