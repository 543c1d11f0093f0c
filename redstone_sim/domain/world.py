"""Position-keyed world container.

The world is the only mutable state during a run. Blocks are never added or
removed after construction; the engine only replaces a block's value.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from redstone_sim.domain.blocks import Block, timer_running
from redstone_sim.domain.connectivity import PlacedBlock
from redstone_sim.domain.geometry import Position


class World:
    """Mapping from Position to Block with at most one block per cell."""

    def __init__(self, blocks: Mapping[Position, Block] | None = None) -> None:
        self._blocks: dict[Position, Block] = dict(blocks or {})

    @classmethod
    def from_placements(cls, placements: Iterable[PlacedBlock]) -> World:
        """Build a world from placed blocks.

        Positions must be distinct; `SimRequest` rejects duplicates before a
        world is ever built.
        """
        return cls({placed.position: placed.block for placed in placements})

    def __len__(self) -> int:
        return len(self._blocks)

    def __contains__(self, pos: object) -> bool:
        return pos in self._blocks

    def __iter__(self) -> Iterator[Position]:
        return iter(sorted(self._blocks))

    def __getitem__(self, pos: Position) -> Block:
        return self._blocks[pos]

    def get(self, pos: Position) -> Block | None:
        return self._blocks.get(pos)

    def replace(self, pos: Position, block: Block) -> None:
        """Swap the block at an occupied position for its updated value."""
        if pos not in self._blocks:
            raise KeyError(f"no block at {pos}")
        self._blocks[pos] = block

    def positions(self) -> list[Position]:
        """Return occupied positions in ascending order."""
        return sorted(self._blocks)

    def placements(self) -> list[PlacedBlock]:
        """Return the current state as placed blocks, ascending by position."""
        return [PlacedBlock(pos, self._blocks[pos]) for pos in self.positions()]

    def snapshot(self) -> Mapping[Position, Block]:
        """Return a read-only copy of the current state.

        Block values are immutable, so a shallow copy is a full snapshot.
        """
        return MappingProxyType(dict(self._blocks))

    def timers_active(self) -> bool:
        """Return True if any button or repeater still has a countdown running."""
        return any(timer_running(block) for block in self._blocks.values())
