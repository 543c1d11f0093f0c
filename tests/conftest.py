"""
Pytest configuration and shared circuit fixtures.
"""

from __future__ import annotations

import pytest

from redstone_sim.domain import (
    Button,
    Comparator,
    Direction,
    Dust,
    Hopper,
    Lamp,
    Lever,
    Piston,
    PlacedBlock,
    Position,
    Repeater,
    SimRequest,
    Torch,
)


def _place(x: int, y: int, z: int, block: object) -> PlacedBlock:
    return PlacedBlock(Position(x, y, z), block)


@pytest.fixture
def lever_to_lamp() -> SimRequest:
    """Lever (on, facing east) -> one wire -> lamp."""
    return SimRequest(
        ticks=5,
        blocks=(
            _place(0, 0, 0, Lever(on=True, facing=Direction.EAST)),
            _place(1, 0, 0, Dust(power=0)),
            _place(2, 0, 0, Lamp(on=False)),
        ),
    )


@pytest.fixture
def mixed_circuit() -> SimRequest:
    """Every variant wired together, with a button timer still running at t=0."""
    return SimRequest(
        ticks=40,
        blocks=(
            _place(0, 0, 0, Lever(on=True, facing=Direction.EAST)),
            _place(1, 0, 0, Dust(power=0)),
            _place(
                2,
                0,
                0,
                Repeater(delay=2, ticks_remaining=0, powered=False, facing=Direction.EAST),
            ),
            _place(3, 0, 0, Comparator(output=0, facing=Direction.EAST)),
            _place(4, 0, 0, Dust(power=0)),
            _place(5, 0, 0, Piston(extended=False, facing=Direction.UP)),
            _place(4, 1, 0, Torch(lit=True, facing=Direction.DOWN)),
            _place(5, 1, 0, Lamp(on=False)),
            _place(0, 0, 3, Button(ticks_remaining=3, facing=Direction.EAST)),
            _place(1, 0, 3, Hopper(enabled=True, facing=Direction.DOWN)),
        ),
    )
