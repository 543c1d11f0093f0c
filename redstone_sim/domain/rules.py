"""Per-variant transition rules, applied once per tick against a snapshot.

Rules read neighbor state only from the pre-tick snapshot and return a new
block value; they never look at blocks already updated in the same tick.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace

from redstone_sim.config.constants import MAX_POWER, MIN_POWER
from redstone_sim.domain.blocks import (
    Block,
    Button,
    Comparator,
    Dust,
    Hopper,
    Lamp,
    Lever,
    Piston,
    Repeater,
    Torch,
    timer_running,
)
from redstone_sim.domain.geometry import Direction, Position, direction_between

Snapshot = Mapping[Position, Block]
"""Read-only view of the world as it was at the start of a tick."""


@dataclass(frozen=True)
class UpdateOutcome:
    """Result of applying a block's rule for one tick."""

    block: Block
    changed: bool
    """Any field differs from the pre-tick value."""
    output_changed: bool
    """An output-relevant field changed; output positions must be re-evaluated."""
    pending: bool
    """A countdown is still running; the block must be re-evaluated next tick."""


def output_towards(block: Block | None, direction: Direction) -> int:
    """Return the power `block` offers to the neighbor lying in `direction`."""
    if isinstance(block, Lever):
        return MAX_POWER if block.on and block.facing == direction else MIN_POWER
    if isinstance(block, Button):
        if block.ticks_remaining > 0 and block.facing == direction:
            return MAX_POWER
        return MIN_POWER
    if isinstance(block, Repeater):
        return MAX_POWER if block.powered and block.facing == direction else MIN_POWER
    if isinstance(block, Comparator):
        if block.output > 0 and block.facing == direction:
            return block.output
        return MIN_POWER
    if isinstance(block, Torch):
        return MAX_POWER if block.lit and direction != block.facing else MIN_POWER
    if isinstance(block, Dust):
        return block.power
    return MIN_POWER


def _incoming(pos: Position, snapshot: Snapshot) -> list[tuple[Block, int]]:
    """Return (neighbor, offered power) for every occupied neighbor of `pos`."""
    result: list[tuple[Block, int]] = []
    for neighbor_pos in pos.neighbors():
        neighbor = snapshot.get(neighbor_pos)
        if neighbor is None:
            continue
        result.append((neighbor, output_towards(neighbor, direction_between(neighbor_pos, pos))))
    return result


def _receives_power(pos: Position, snapshot: Snapshot) -> bool:
    return any(power > 0 for _, power in _incoming(pos, snapshot))


def _update_lever(block: Lever, pos: Position, snapshot: Snapshot) -> tuple[Block, bool]:
    return block, False


def _update_button(block: Button, pos: Position, snapshot: Snapshot) -> tuple[Block, bool]:
    if block.ticks_remaining == 0:
        return block, False
    remaining = block.ticks_remaining - 1
    # output drops from full strength to zero on the last decrement
    return replace(block, ticks_remaining=remaining), remaining == 0


def _update_repeater(block: Repeater, pos: Position, snapshot: Snapshot) -> tuple[Block, bool]:
    back = pos.offset(block.facing.opposite)
    incoming = output_towards(snapshot.get(back), block.facing)

    powered = block.powered
    remaining = block.ticks_remaining
    if incoming > 0:
        if not powered and remaining == 0:
            remaining = block.delay
    else:
        powered = False
        remaining = 0

    if remaining > 0:
        remaining -= 1
        if remaining == 0 and incoming > 0:
            powered = True

    updated = replace(block, ticks_remaining=remaining, powered=powered)
    return updated, powered != block.powered


def _update_comparator(
    block: Comparator, pos: Position, snapshot: Snapshot
) -> tuple[Block, bool]:
    output = max((power for _, power in _incoming(pos, snapshot)), default=MIN_POWER)
    if output == block.output:
        return block, False
    return replace(block, output=output), True


def _update_dust(block: Dust, pos: Position, snapshot: Snapshot) -> tuple[Block, bool]:
    power = MIN_POWER
    for neighbor, offered in _incoming(pos, snapshot):
        if isinstance(neighbor, Dust):
            candidate = max(neighbor.power - 1, MIN_POWER)
        else:
            candidate = offered
        power = max(power, candidate)
    if power == block.power:
        return block, False
    return replace(block, power=power), True


def _update_lamp(block: Lamp, pos: Position, snapshot: Snapshot) -> tuple[Block, bool]:
    on = _receives_power(pos, snapshot)
    if on == block.on:
        return block, False
    # lamps drive nothing
    return replace(block, on=on), False


def _update_piston(block: Piston, pos: Position, snapshot: Snapshot) -> tuple[Block, bool]:
    extended = _receives_power(pos, snapshot)
    if extended == block.extended:
        return block, False
    return replace(block, extended=extended), True


def _update_hopper(block: Hopper, pos: Position, snapshot: Snapshot) -> tuple[Block, bool]:
    enabled = not _receives_power(pos, snapshot)
    if enabled == block.enabled:
        return block, False
    return replace(block, enabled=enabled), False


def _update_torch(block: Torch, pos: Position, snapshot: Snapshot) -> tuple[Block, bool]:
    mount = snapshot.get(pos.offset(block.facing))
    lit = output_towards(mount, block.facing.opposite) == MIN_POWER
    if lit == block.lit:
        return block, False
    return replace(block, lit=lit), True


_RULES: dict[type, Callable[..., tuple[Block, bool]]] = {
    Lever: _update_lever,
    Button: _update_button,
    Repeater: _update_repeater,
    Comparator: _update_comparator,
    Dust: _update_dust,
    Lamp: _update_lamp,
    Piston: _update_piston,
    Hopper: _update_hopper,
    Torch: _update_torch,
}


def update_block(block: Block, pos: Position, snapshot: Snapshot) -> UpdateOutcome:
    """Apply the variant rule of `block` at `pos` for one tick."""
    try:
        rule = _RULES[type(block)]
    except KeyError as exc:
        raise TypeError(f"unknown block variant: {type(block).__name__}") from exc
    updated, output_changed = rule(block, pos, snapshot)
    return UpdateOutcome(
        block=updated,
        changed=updated != block,
        output_changed=output_changed,
        pending=timer_running(updated),
    )
