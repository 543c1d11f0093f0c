"""Arrow schema definitions for simulation run reports.

Every report writer works against the column contracts defined here.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

DIFF_LOG_SCHEMA_VERSION = 1
RUN_SUMMARY_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Diff log schema
# ---------------------------------------------------------------------------

# Variant field columns; null where the block variant has no such field.
BLOCK_FIELD_COLUMNS: list[tuple[str, pa.DataType]] = [
    ("facing", pa.string()),
    ("on", pa.bool_()),
    ("power", pa.int64()),
    ("ticks_remaining", pa.int64()),
    ("delay", pa.int64()),
    ("powered", pa.bool_()),
    ("output", pa.int64()),
    ("lit", pa.bool_()),
    ("extended", pa.bool_()),
    ("enabled", pa.bool_()),
]

DIFF_LOG_SCHEMA = pa.schema(
    [
        ("tick", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("z", pa.int64()),
        ("block_type", pa.string()),
    ]
    + BLOCK_FIELD_COLUMNS
)
