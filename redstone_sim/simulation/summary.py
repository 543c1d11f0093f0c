"""Per-run summary statistics derived from a SimResponse."""

from __future__ import annotations

from dataclasses import dataclass

from redstone_sim.domain.trace import SimResponse


@dataclass(frozen=True)
class RunSummary:
    """Aggregate view of one finished run."""

    terminated: str
    block_count: int
    ticks_with_changes: int
    total_changes: int
    max_changes_per_tick: int
    changed_positions: int
    last_change_tick: int | None

    def to_dict(self) -> dict[str, int | str | None]:
        return {
            "terminated": self.terminated,
            "block_count": self.block_count,
            "ticks_with_changes": self.ticks_with_changes,
            "total_changes": self.total_changes,
            "max_changes_per_tick": self.max_changes_per_tick,
            "changed_positions": self.changed_positions,
            "last_change_tick": self.last_change_tick,
        }


def summarize_response(response: SimResponse, block_count: int) -> RunSummary:
    """Summarize diffs of a run over a world holding `block_count` blocks."""
    if block_count < 0:
        raise ValueError("block_count must be >= 0")
    per_tick = [len(diff.changes) for diff in response.diffs]
    positions = {change.position for diff in response.diffs for change in diff.changes}
    return RunSummary(
        terminated=response.terminated.value,
        block_count=block_count,
        ticks_with_changes=len(response.diffs),
        total_changes=sum(per_tick),
        max_changes_per_tick=max(per_tick, default=0),
        changed_positions=len(positions),
        last_change_tick=response.diffs[-1].tick if response.diffs else None,
    )
