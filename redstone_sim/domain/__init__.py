"""Domain layer: geometry, block variants, connectivity, rules, and world model."""

from redstone_sim.domain.blocks import (
    BLOCK_CLASSES,
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
    block_fields,
    block_type,
    timer_running,
)
from redstone_sim.domain.connectivity import (
    Connections,
    PlacedBlock,
    block_connections,
    downstream_of,
    influence_graph,
    input_positions,
    output_positions,
)
from redstone_sim.domain.geometry import Direction, Position, direction_between
from redstone_sim.domain.rules import UpdateOutcome, output_towards, update_block
from redstone_sim.domain.trace import (
    BlockChange,
    SimRequest,
    SimResponse,
    Termination,
    TickDiff,
)
from redstone_sim.domain.world import World

__all__ = [
    "BLOCK_CLASSES",
    "Block",
    "BlockChange",
    "Button",
    "Comparator",
    "Connections",
    "Direction",
    "Dust",
    "Hopper",
    "Lamp",
    "Lever",
    "Piston",
    "PlacedBlock",
    "Position",
    "Repeater",
    "SimRequest",
    "SimResponse",
    "Termination",
    "TickDiff",
    "Torch",
    "UpdateOutcome",
    "World",
    "block_connections",
    "block_fields",
    "block_type",
    "direction_between",
    "downstream_of",
    "influence_graph",
    "input_positions",
    "output_positions",
    "output_towards",
    "timer_running",
    "update_block",
]
