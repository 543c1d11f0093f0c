"""Core tick engine: snapshot, dirty-set re-evaluation, and the run loop."""

from __future__ import annotations

import logging

from redstone_sim.domain.connectivity import output_positions
from redstone_sim.domain.geometry import Position
from redstone_sim.domain.rules import update_block
from redstone_sim.domain.trace import (
    BlockChange,
    SimRequest,
    SimResponse,
    Termination,
    TickDiff,
)
from redstone_sim.domain.world import World
from redstone_sim.simulation.termination import QuiescenceDetector

logger = logging.getLogger(__name__)


class TickEngine:
    """Advance a world one tick at a time, re-evaluating only dirty cells.

    The first tick evaluates every block. Afterwards a block is evaluated only
    when a neighbor whose outputs reach it changed output on the previous
    tick, or when its own countdown is still running.
    """

    def __init__(self, world: World) -> None:
        self.world = world
        self.dirty: set[Position] = set(world.positions())

    def step(self) -> tuple[BlockChange, ...]:
        """Run one tick and return the changed blocks in ascending position order."""
        snapshot = self.world.snapshot()
        changes: list[BlockChange] = []
        next_dirty: set[Position] = set()

        for pos in sorted(self.dirty):
            block = snapshot.get(pos)
            if block is None:
                continue
            outcome = update_block(block, pos, snapshot)
            if outcome.changed:
                self.world.replace(pos, outcome.block)
                changes.append(BlockChange(pos, outcome.block))
            if outcome.output_changed:
                next_dirty.update(
                    target
                    for target in output_positions(outcome.block, pos)
                    if target in self.world
                )
            if outcome.pending:
                next_dirty.add(pos)

        self.dirty = next_dirty
        return tuple(changes)


def simulate(request: SimRequest) -> SimResponse:
    """Simulate `request.ticks` ticks, or until the world becomes stable.

    Only ticks that changed at least one block produce a TickDiff.
    """
    world = World.from_placements(request.blocks)
    engine = TickEngine(world)
    detector = QuiescenceDetector(world)
    diffs: list[TickDiff] = []

    for tick in range(1, request.ticks + 1):
        evaluated = len(engine.dirty)
        changes = engine.step()
        logger.debug(
            "tick %d: evaluated=%d changed=%d next_dirty=%d",
            tick,
            evaluated,
            len(changes),
            len(engine.dirty),
        )
        if changes:
            diffs.append(TickDiff(tick=tick, changes=changes))
        stable = detector.observe(changes)
        if request.early_exit and stable:
            logger.info("stable after %d ticks (%d diffs)", tick, len(diffs))
            return SimResponse(diffs=tuple(diffs), terminated=Termination.STABLE)

    logger.info("tick budget of %d exhausted (%d diffs)", request.ticks, len(diffs))
    return SimResponse(diffs=tuple(diffs), terminated=Termination.MAX_TICKS_REACHED)
