"""Tests for the World container."""

from __future__ import annotations

import pytest

from redstone_sim.domain.blocks import Button, Dust, Lamp, Repeater
from redstone_sim.domain.connectivity import PlacedBlock
from redstone_sim.domain.geometry import Direction, Position
from redstone_sim.domain.world import World


def _world() -> World:
    return World.from_placements(
        [
            PlacedBlock(Position(2, 0, 0), Lamp(on=False)),
            PlacedBlock(Position(0, 0, 0), Dust(power=3)),
            PlacedBlock(Position(0, -1, 5), Dust(power=0)),
        ]
    )


class TestWorldConstruction:
    def test_from_placements_keys_by_position(self) -> None:
        world = _world()
        assert len(world) == 3
        assert world[Position(2, 0, 0)] == Lamp(on=False)

    def test_empty_world(self) -> None:
        world = World()
        assert len(world) == 0
        assert world.positions() == []
        assert not world.timers_active()


class TestWorldAccess:
    def test_iteration_is_ascending(self) -> None:
        world = _world()
        assert list(world) == [Position(0, -1, 5), Position(0, 0, 0), Position(2, 0, 0)]
        assert [p.position for p in world.placements()] == world.positions()

    def test_lookup(self) -> None:
        world = _world()
        assert Position(0, 0, 0) in world
        assert Position(9, 9, 9) not in world
        assert world[Position(0, 0, 0)] == Dust(power=3)
        assert world.get(Position(9, 9, 9)) is None

    def test_replace_updates_value(self) -> None:
        world = _world()
        world.replace(Position(2, 0, 0), Lamp(on=True))
        assert world[Position(2, 0, 0)] == Lamp(on=True)
        assert len(world) == 3

    def test_replace_empty_cell_raises(self) -> None:
        with pytest.raises(KeyError):
            _world().replace(Position(7, 7, 7), Lamp(on=True))


class TestWorldSnapshot:
    def test_snapshot_is_detached_from_later_replacements(self) -> None:
        world = _world()
        snapshot = world.snapshot()
        world.replace(Position(0, 0, 0), Dust(power=9))
        assert snapshot[Position(0, 0, 0)] == Dust(power=3)

    def test_snapshot_is_read_only(self) -> None:
        snapshot = _world().snapshot()
        with pytest.raises(TypeError):
            snapshot[Position(0, 0, 0)] = Dust(power=1)  # type: ignore[index]


class TestTimersActive:
    def test_running_button(self) -> None:
        world = World({Position(0, 0, 0): Button(ticks_remaining=2, facing=Direction.EAST)})
        assert world.timers_active()

    def test_idle_repeater(self) -> None:
        world = World(
            {
                Position(0, 0, 0): Repeater(
                    delay=3, ticks_remaining=0, powered=True, facing=Direction.EAST
                )
            }
        )
        assert not world.timers_active()
