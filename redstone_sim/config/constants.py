"""Centralized domain constants for signal simulation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

MAX_POWER = 15
"""Full signal strength emitted by a powered source."""

MIN_POWER = 0
"""Signal strength of an unpowered cell (and of air)."""

MIN_REPEATER_DELAY = 1
"""Shortest configurable repeater delay in ticks."""

MAX_REPEATER_DELAY = 4
"""Longest configurable repeater delay in ticks."""

MAX_TIMER_TICKS = 255
"""Upper bound for any countdown field (button / repeater ticks_remaining)."""

MAX_TICK_BUDGET = 2**32 - 1
"""Largest tick budget accepted in a request."""

DEFAULT_EARLY_EXIT = True
"""Stop as soon as the world is quiescent unless a request says otherwise."""

FLUSH_THRESHOLD = 8_192
"""Flush diff-log rows to Parquet once this in-memory row count is reached."""

BLOCK_TYPES: tuple[str, ...] = (
    "lever",
    "button",
    "dust",
    "lamp",
    "repeater",
    "comparator",
    "torch",
    "piston",
    "hopper",
)
"""Wire tags of every block variant, in declaration order."""
