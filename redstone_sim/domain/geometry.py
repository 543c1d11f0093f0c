"""Integer 3D positions and the six axis-aligned directions between them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """Unit axis direction.

    Member order is the fixed scan order for every six-neighbor loop; it
    decides tie-breaking wherever the first matching neighbor wins.
    """

    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"
    SOUTH = "south"
    NORTH = "north"

    @classmethod
    def all(cls) -> tuple[Direction, ...]:
        """Return all six directions in scan order."""
        return _ALL_DIRECTIONS

    @property
    def offset(self) -> tuple[int, int, int]:
        """Unit (dx, dy, dz) step for this direction."""
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_ALL_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)

_OFFSETS: dict[Direction, tuple[int, int, int]] = {
    Direction.EAST: (1, 0, 0),
    Direction.WEST: (-1, 0, 0),
    Direction.UP: (0, 1, 0),
    Direction.DOWN: (0, -1, 0),
    Direction.SOUTH: (0, 0, 1),
    Direction.NORTH: (0, 0, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.SOUTH: Direction.NORTH,
    Direction.NORTH: Direction.SOUTH,
}


@dataclass(frozen=True, order=True)
class Position:
    """A cell in the world. Ordering is lexicographic on (x, y, z)."""

    x: int
    y: int
    z: int

    def offset(self, direction: Direction) -> Position:
        """Return the adjacent position one step towards `direction`."""
        dx, dy, dz = direction.offset
        return Position(self.x + dx, self.y + dy, self.z + dz)

    def neighbors(self) -> tuple[Position, ...]:
        """Return the six adjacent positions in `Direction.all()` order."""
        return tuple(self.offset(d) for d in Direction.all())


def direction_between(source: Position, target: Position) -> Direction:
    """Return the direction that leads from `source` to the adjacent `target`.

    Raises RuntimeError when the positions are not unit-adjacent. Callers only
    ever pass neighbor pairs, so this signals an engine bug rather than bad
    input.
    """
    for direction in Direction.all():
        if source.offset(direction) == target:
            return direction
    raise RuntimeError(f"positions are not adjacent: {source} -> {target}")
