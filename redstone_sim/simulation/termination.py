"""Early-stability detection for the tick loop."""

from __future__ import annotations

from collections.abc import Sequence

from redstone_sim.domain.trace import BlockChange, Termination
from redstone_sim.domain.world import World

__all__ = ["QuiescenceDetector", "Termination"]


class QuiescenceDetector:
    """Detect a tick with no changes while no countdown is pending."""

    def __init__(self, world: World) -> None:
        self.world = world

    def observe(self, changes: Sequence[BlockChange]) -> bool:
        """Return True once the world is inert after the tick that produced `changes`.

        An unchanged tick with a timer still running is not stable: the
        pending countdown must be allowed to fire.
        """
        if changes:
            return False
        return not self.world.timers_active()
