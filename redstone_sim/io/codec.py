"""JSON codec for requests, responses and connection queries.

This is the thin host binding around :func:`simulate`: decode the payload,
run, encode the result. Every decoding problem surfaces as a single
:class:`InvalidInputError` before any simulation work starts.

Placed blocks are flat objects carrying position and variant fields together::

    {"x": 0, "y": 0, "z": 0, "type": "lever", "on": true, "facing": "east"}
"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from redstone_sim.config.constants import DEFAULT_EARLY_EXIT
from redstone_sim.domain.blocks import BLOCK_CLASSES, Block, block_fields
from redstone_sim.domain.connectivity import Connections, PlacedBlock, block_connections
from redstone_sim.domain.geometry import Direction, Position
from redstone_sim.domain.trace import SimRequest, SimResponse, TickDiff
from redstone_sim.simulation.engine import simulate


class InvalidInputError(ValueError):
    """Payload could not be decoded into a valid request or block."""


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _load(payload: str | bytes | bytearray | dict[str, Any]) -> Any:
    if isinstance(payload, dict):
        return payload
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError, RecursionError) as exc:
        raise InvalidInputError(f"payload is not valid JSON: {exc}") from exc


def _require_object(raw: object, label: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise InvalidInputError(f"{label} must be a JSON object")
    return raw


def _require_key(obj: dict[str, Any], key: str, label: str) -> Any:
    if key not in obj:
        raise InvalidInputError(f"{label} is missing field `{key}`")
    return obj[key]


def _decode_coordinate(raw: object, key: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InvalidInputError(f"{key} must be an integer value")
    return raw


def decode_position(raw: object) -> Position:
    obj = _require_object(raw, "position")
    return Position(
        *(_decode_coordinate(_require_key(obj, key, "position"), key) for key in ("x", "y", "z"))
    )


def _decode_block(obj: dict[str, Any]) -> Block:
    tag = _require_key(obj, "type", "block")
    if not isinstance(tag, str) or tag not in BLOCK_CLASSES:
        valid = ", ".join(BLOCK_CLASSES)
        raise InvalidInputError(f"unknown block type {tag!r}; must be one of {valid}")
    cls = BLOCK_CLASSES[tag]
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        value = _require_key(obj, f.name, f"{tag} block")
        if f.name == "facing":
            try:
                value = Direction(value)
            except ValueError as exc:
                valid = ", ".join(d.value for d in Direction)
                raise InvalidInputError(f"facing must be one of {valid}, got {value!r}") from exc
        kwargs[f.name] = value
    try:
        return cls(**kwargs)
    except ValueError as exc:
        raise InvalidInputError(f"invalid {tag} block: {exc}") from exc


def decode_placed_block(payload: str | bytes | bytearray | dict[str, Any]) -> PlacedBlock:
    """Decode one flat placed-block object."""
    obj = _require_object(_load(payload), "block")
    return PlacedBlock(position=decode_position(obj), block=_decode_block(obj))


def decode_request(payload: str | bytes | bytearray | dict[str, Any]) -> SimRequest:
    """Decode a simulation request; `early_exit` defaults to true when absent."""
    obj = _require_object(_load(payload), "request")
    ticks = _require_key(obj, "ticks", "request")
    world = _require_object(_require_key(obj, "world", "request"), "world")
    raw_blocks = _require_key(world, "blocks", "world")
    if not isinstance(raw_blocks, list):
        raise InvalidInputError("world.blocks must be a JSON array")
    early_exit = obj.get("early_exit", DEFAULT_EARLY_EXIT)
    blocks = tuple(decode_placed_block(_require_object(raw, "block")) for raw in raw_blocks)
    try:
        return SimRequest(ticks=ticks, blocks=blocks, early_exit=early_exit)
    except ValueError as exc:
        raise InvalidInputError(f"invalid request: {exc}") from exc


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode_position(pos: Position) -> dict[str, int]:
    return {"x": pos.x, "y": pos.y, "z": pos.z}


def encode_placed_block(placed: PlacedBlock) -> dict[str, Any]:
    """Encode a placed block as a flat object (position, tag, variant fields)."""
    payload: dict[str, Any] = encode_position(placed.position)
    payload["type"] = placed.block.TYPE
    for name, value in block_fields(placed.block).items():
        payload[name] = value.value if isinstance(value, Direction) else value
    return payload


def _encode_diff(diff: TickDiff) -> dict[str, Any]:
    return {"tick": diff.tick, "changes": [encode_placed_block(c) for c in diff.changes]}


def response_to_dict(response: SimResponse) -> dict[str, Any]:
    return {
        "diffs": [_encode_diff(diff) for diff in response.diffs],
        "terminated": response.terminated.value,
    }


def request_to_dict(request: SimRequest) -> dict[str, Any]:
    return {
        "ticks": request.ticks,
        "world": {"blocks": [encode_placed_block(b) for b in request.blocks]},
        "early_exit": request.early_exit,
    }


def connections_to_dict(connections: Connections) -> dict[str, list[dict[str, int]]]:
    return {
        "inputs": [encode_position(p) for p in connections.inputs],
        "outputs": [encode_position(p) for p in connections.outputs],
    }


def _dumps(payload: dict[str, Any]) -> str:
    try:
        return json.dumps(payload, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"could not encode result: {exc}") from exc


def encode_response(response: SimResponse) -> str:
    return _dumps(response_to_dict(response))


# ---------------------------------------------------------------------------
# Pass-through entry points
# ---------------------------------------------------------------------------


def simulate_json(payload: str | bytes | bytearray) -> str:
    """Decode a JSON request, simulate it, and return the JSON response."""
    return encode_response(simulate(decode_request(payload)))


def block_connections_json(payload: str | bytes | bytearray) -> str:
    """Decode one placed block and return its input/output positions as JSON."""
    return _dumps(connections_to_dict(block_connections(decode_placed_block(payload))))
