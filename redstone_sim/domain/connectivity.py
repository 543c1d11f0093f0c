"""Which neighbor cells a block reads power from and which it can influence.

The engine uses output positions to decide which cells to re-evaluate after a
block's output changes. Authoring tools use the same rules through
:func:`block_connections` and :func:`influence_graph`, neither of which runs
a simulation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import networkx as nx

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
)
from redstone_sim.domain.geometry import Direction, Position


@dataclass(frozen=True)
class PlacedBlock:
    """A block together with the cell it occupies."""

    position: Position
    block: Block


@dataclass(frozen=True)
class Connections:
    """Result of the connection query for one placed block."""

    inputs: tuple[Position, ...]
    outputs: tuple[Position, ...]


def input_positions(block: Block, pos: Position) -> tuple[Position, ...]:
    """Return the cells `block` at `pos` reads power from."""
    if isinstance(block, (Lever, Button)):
        return ()
    if isinstance(block, (Dust, Lamp, Piston, Hopper, Comparator)):
        return pos.neighbors()
    if isinstance(block, Repeater):
        return (pos.offset(block.facing.opposite),)
    if isinstance(block, Torch):
        return (pos.offset(block.facing),)
    raise TypeError(f"unknown block variant: {type(block).__name__}")


def output_positions(block: Block, pos: Position) -> tuple[Position, ...]:
    """Return the cells `block` at `pos` may re-dirty when its output changes."""
    if isinstance(block, (Lever, Button, Repeater, Comparator)):
        return (pos.offset(block.facing),)
    if isinstance(block, Torch):
        # the mount block is never powered by its own torch
        return tuple(pos.offset(d) for d in Direction.all() if d != block.facing)
    if isinstance(block, Dust):
        return pos.neighbors()
    if isinstance(block, (Lamp, Piston, Hopper)):
        return ()
    raise TypeError(f"unknown block variant: {type(block).__name__}")


def block_connections(placed: PlacedBlock) -> Connections:
    """Compute input and output positions of a single placed block."""
    return Connections(
        inputs=input_positions(placed.block, placed.position),
        outputs=output_positions(placed.block, placed.position),
    )


def influence_graph(blocks: Mapping[Position, Block]) -> nx.DiGraph:
    """Build the directed graph of which block can drive which.

    Nodes are occupied positions (attribute ``block_type``). An edge ``a -> b``
    exists when `b` is an output position of `a` and `a` is an input position
    of `b`, i.e. a change at `a` can alter the power `b` computes.
    """
    g = nx.DiGraph()
    for pos in sorted(blocks):
        g.add_node(pos, block_type=blocks[pos].TYPE)
    for pos in sorted(blocks):
        for target in output_positions(blocks[pos], pos):
            neighbor = blocks.get(target)
            if neighbor is None:
                continue
            if pos in input_positions(neighbor, target):
                g.add_edge(pos, target)
    return g


def downstream_of(blocks: Mapping[Position, Block], pos: Position) -> set[Position]:
    """Return every occupied position reachable from `pos` in the influence graph."""
    if pos not in blocks:
        raise KeyError(f"no block at {pos}")
    return set(nx.descendants(influence_graph(blocks), pos))
