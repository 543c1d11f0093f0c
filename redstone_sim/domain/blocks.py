"""Closed set of block variants and their signal-relevant fields.

Every variant is an immutable value. The engine never mutates a block in
place: an update produces a new value that replaces the old one in the world,
so a recorded change can never alias live state.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

from redstone_sim.config.constants import (
    MAX_POWER,
    MAX_REPEATER_DELAY,
    MAX_TIMER_TICKS,
    MIN_POWER,
    MIN_REPEATER_DELAY,
)
from redstone_sim.domain.geometry import Direction


def _require_bool(value: object, name: str) -> None:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean value")


def _require_int(value: object, name: str, low: int, high: int) -> None:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer value")
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


def _require_direction(value: object, name: str = "facing") -> None:
    if not isinstance(value, Direction):
        raise ValueError(f"{name} must be a Direction")


@dataclass(frozen=True)
class Lever:
    """Constant source; only the caller sets `on`, at t=0."""

    TYPE: ClassVar[str] = "lever"

    on: bool
    facing: Direction

    def __post_init__(self) -> None:
        _require_bool(self.on, "on")
        _require_direction(self.facing)


@dataclass(frozen=True)
class Button:
    """Self-decaying source, powered while `ticks_remaining` > 0."""

    TYPE: ClassVar[str] = "button"

    ticks_remaining: int
    facing: Direction

    def __post_init__(self) -> None:
        _require_int(self.ticks_remaining, "ticks_remaining", 0, MAX_TIMER_TICKS)
        _require_direction(self.facing)


@dataclass(frozen=True)
class Dust:
    """Wire carrying a power level that drops by one per hop."""

    TYPE: ClassVar[str] = "dust"

    power: int

    def __post_init__(self) -> None:
        _require_int(self.power, "power", MIN_POWER, MAX_POWER)


@dataclass(frozen=True)
class Lamp:
    TYPE: ClassVar[str] = "lamp"

    on: bool

    def __post_init__(self) -> None:
        _require_bool(self.on, "on")


@dataclass(frozen=True)
class Repeater:
    """One-directional gate that switches on `delay` ticks after its back input."""

    TYPE: ClassVar[str] = "repeater"

    delay: int
    ticks_remaining: int
    powered: bool
    facing: Direction

    def __post_init__(self) -> None:
        _require_int(self.delay, "delay", MIN_REPEATER_DELAY, MAX_REPEATER_DELAY)
        _require_int(self.ticks_remaining, "ticks_remaining", 0, MAX_TIMER_TICKS)
        _require_bool(self.powered, "powered")
        _require_direction(self.facing)


@dataclass(frozen=True)
class Comparator:
    """Passes the strongest incoming signal out of its front."""

    TYPE: ClassVar[str] = "comparator"

    output: int
    facing: Direction

    def __post_init__(self) -> None:
        _require_int(self.output, "output", MIN_POWER, MAX_POWER)
        _require_direction(self.facing)


@dataclass(frozen=True)
class Torch:
    """Inverter: lit unless the block it is mounted on powers it.

    `facing` points at the mount block.
    """

    TYPE: ClassVar[str] = "torch"

    lit: bool
    facing: Direction

    def __post_init__(self) -> None:
        _require_bool(self.lit, "lit")
        _require_direction(self.facing)


@dataclass(frozen=True)
class Piston:
    TYPE: ClassVar[str] = "piston"

    extended: bool
    facing: Direction

    def __post_init__(self) -> None:
        _require_bool(self.extended, "extended")
        _require_direction(self.facing)


@dataclass(frozen=True)
class Hopper:
    """Consumer with inverted logic: enabled while unpowered."""

    TYPE: ClassVar[str] = "hopper"

    enabled: bool
    facing: Direction

    def __post_init__(self) -> None:
        _require_bool(self.enabled, "enabled")
        _require_direction(self.facing)


Block = Lever | Button | Dust | Lamp | Repeater | Comparator | Torch | Piston | Hopper
"""Any placeable block variant."""

BLOCK_CLASSES: dict[str, type[Block]] = {
    cls.TYPE: cls
    for cls in (Lever, Button, Dust, Lamp, Repeater, Comparator, Torch, Piston, Hopper)
}
"""Variant class by wire tag."""


def block_type(block: Block) -> str:
    """Return the wire tag of a block (e.g. ``"repeater"``)."""
    return block.TYPE


def block_fields(block: Block) -> dict[str, object]:
    """Return the variant's fields as a plain dict, in declaration order."""
    return {f.name: getattr(block, f.name) for f in fields(block)}


def timer_running(block: Block) -> bool:
    """Return True when a button or repeater still has a countdown pending."""
    if isinstance(block, (Button, Repeater)):
        return block.ticks_remaining > 0
    return False
