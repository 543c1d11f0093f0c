"""
redstone_sim: discrete-time signal propagation through a 3D block grid.

A caller supplies a `SimRequest` (tick budget, t=0 block placements, early-exit
switch) and receives a `SimResponse`: for each tick that changed anything, the
blocks whose state changed, plus why the run stopped.

Layers:
- domain:     positions, block variants, connectivity, per-variant rules
- simulation: dirty-set tick engine, termination, summaries, run reports
- io:         JSON codec (host binding) and report schemas
- cli:        `redstone-sim` command-line entry point
"""

from redstone_sim.domain import (
    Direction,
    PlacedBlock,
    Position,
    SimRequest,
    SimResponse,
    Termination,
    TickDiff,
    block_connections,
)
from redstone_sim.simulation import simulate

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "PlacedBlock",
    "Position",
    "SimRequest",
    "SimResponse",
    "Termination",
    "TickDiff",
    "block_connections",
    "simulate",
]
