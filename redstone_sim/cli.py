"""CLI entrypoint for simulation runs and connection queries.

This module owns CLI argument parsing and dispatch. All domain logic lives in
the library modules:

- ``redstone_sim.io.codec``            – JSON request/response codec
- ``redstone_sim.config``              – run configuration dataclasses
- ``redstone_sim.simulation.engine``   – ``simulate`` tick engine
- ``redstone_sim.simulation.persistence`` – run report writers
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from redstone_sim.config.types import LOG_LEVELS, RunConfig
from redstone_sim.io.codec import (
    InvalidInputError,
    block_connections_json,
    decode_request,
    response_to_dict,
)
from redstone_sim.simulation.engine import simulate
from redstone_sim.simulation.persistence import write_run_report
from redstone_sim.simulation.summary import summarize_response

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        # rejects inf and nan as well
        if not raw.is_integer():
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _load_config_file(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        loaded = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(loaded, dict):
        parser.error(f"Config file must hold a JSON object: {path}")
    return loaded


def _resolve_run_config(
    args: argparse.Namespace, file_cfg: dict[str, object]
) -> RunConfig:
    """Merge CLI arguments over config-file values over built-in defaults."""
    raw_ticks = _get_val(args.ticks, "ticks", file_cfg, None)
    raw_early_exit = _get_val(args.early_exit, "early_exit", file_cfg, None)
    raw_out_dir = _get_val(args.out_dir, "out_dir", file_cfg, None)
    return RunConfig(
        ticks=None if raw_ticks is None else _coerce_int(raw_ticks, "ticks"),
        early_exit=None if raw_early_exit is None else _coerce_bool(raw_early_exit, "early_exit"),
        out_dir=None if raw_out_dir is None else Path(_coerce_str(raw_out_dir, "out_dir")),
        write_diff_log=_coerce_bool(
            _get_val(args.write_diff_log, "write_diff_log", file_cfg, False), "write_diff_log"
        ),
        log_level=_coerce_str(
            _get_val(args.log_level, "log_level", file_cfg, "WARNING"), "log_level"
        ),
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="redstone-sim", description="Simulate signal propagation through a block grid"
    )
    subparsers = parser.add_subparsers(dest="command")

    sim = subparsers.add_parser("simulate", help="Run a JSON simulation request")
    sim.add_argument("request", type=Path, help="JSON request file")
    sim.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    sim.add_argument("--ticks", type=int, default=None, help="Override the request tick budget")
    sim.add_argument("--early-exit", action=argparse.BooleanOptionalAction, default=None)
    sim.add_argument("--out-dir", type=Path, default=None)
    sim.add_argument("--write-diff-log", action=argparse.BooleanOptionalAction, default=None)
    sim.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(LOG_LEVELS),
        default=None,
    )
    sim.add_argument(
        "--print-diffs",
        action="store_true",
        help="Print the full JSON response instead of the run summary",
    )

    conn = subparsers.add_parser("connections", help="Show a block's input/output cells")
    conn.add_argument("block", type=Path, help="JSON file holding one placed block")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def _run_simulate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    file_cfg = _load_config_file(parser, args.config)
    try:
        run_config = _resolve_run_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=run_config.logging_level)

    try:
        request = run_config.apply(decode_request(args.request.read_bytes()))
    except FileNotFoundError:
        parser.error(f"Request file not found: {args.request}")
    except (InvalidInputError, ValueError) as exc:
        parser.error(str(exc))

    response = simulate(request)
    summary = summarize_response(response, block_count=len(request.blocks))
    if run_config.out_dir is not None:
        written = write_run_report(
            response,
            summary,
            run_config.out_dir,
            write_diff_log_file=run_config.write_diff_log,
        )
        logger.info("wrote %s", ", ".join(str(p) for p in written.values()))

    if args.print_diffs:
        print(json.dumps(response_to_dict(response), ensure_ascii=False, indent=2))
    else:
        print(json.dumps(summary.to_dict(), ensure_ascii=False, indent=2))


def _run_connections(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        result = block_connections_json(args.block.read_bytes())
    except FileNotFoundError:
        parser.error(f"Block file not found: {args.block}")
    except InvalidInputError as exc:
        parser.error(str(exc))
    print(json.dumps(json.loads(result), ensure_ascii=False, indent=2))


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    ``simulate`` supports ``--config path/to/config.json``. CLI arguments
    override config-file values; config-file values override the request
    file and built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "simulate":
        _run_simulate(parser, args)
    elif args.command == "connections":
        _run_connections(parser, args)
    else:
        parser.error("a subcommand is required: simulate or connections")


if __name__ == "__main__":
    main()
