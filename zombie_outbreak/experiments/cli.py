"""CLI entrypoint for batch outbreak runs.

This module owns CLI argument parsing and config resolution. All domain
logic lives in the extracted modules:

- ``zombie_outbreak.config``            – configuration dataclasses
- ``zombie_outbreak.simulation.runner`` – ``run_simulation`` batch driver
- ``zombie_outbreak.io.schemas``        – Parquet schemas
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable
from functools import partial
from pathlib import Path
from typing import TypeVar

from zombie_outbreak.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_HOUSES,
    NUM_HUMANS,
    NUM_TICKS,
    NUM_WEAPONS,
    NUM_ZOMBIES,
)
from zombie_outbreak.config.types import RuleConfig, RunConfig, WorldConfig, ZombieMovement
from zombie_outbreak.simulation.runner import run_simulation

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})

T = TypeVar("T")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_grid_size(raw_grid_size: str) -> tuple[int, int]:
    """Parse a grid size formatted as `WxH`."""
    tokens = raw_grid_size.strip().lower().split("x")
    if len(tokens) != 2:
        raise ValueError("grid-size must use WxH format")
    try:
        width = int(tokens[0])
        height = int(tokens[1])
    except ValueError as exc:
        raise ValueError("grid-size must use integer WxH values") from exc
    if width < 1 or height < 1:
        raise ValueError("grid-size must be >= 1x1")
    return width, height


def _parse_zombie_movement(raw_movement: str) -> ZombieMovement:
    """Parse zombie movement mode from CLI/config."""
    try:
        return ZombieMovement(raw_movement)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in ZombieMovement)
        raise ValueError(f"zombie-movement must be one of {valid}") from exc


def _parse_log_level(raw_level: str) -> str:
    level = raw_level.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log-level must be one of {', '.join(LOG_LEVELS)}")
    return level


def _coerce_bool(raw: object, key: str) -> bool:
    """Accept real booleans and the usual on/off spellings found in JSON files."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in _TRUTHY | _FALSY:
        return raw.strip().lower() in _TRUTHY
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Integers, integral floats and numeric strings; booleans are rejected."""
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    return int(raw)


def _coerce_float(raw: object, key: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be a number, got {raw!r}")
    return float(raw)


def _coerce_str(raw: object, key: str) -> str:
    if not isinstance(raw, (str, Path)):
        raise ValueError(f"{key} must be a string, got {raw!r}")
    return str(raw)


def _resolve(
    file_cfg: dict[str, object],
    cli_val: object,
    key: str,
    default: T,
    coerce: Callable[[object, str], T],
) -> T:
    """CLI value if given, else the config-file value, else ``default``."""
    raw = cli_val if cli_val is not None else file_cfg.get(key, default)
    return coerce(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run seeded zombie outbreak simulations")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--grid-size", type=str, default=None, help="WxH, e.g. 50x50")
    parser.add_argument("--zombies", type=int, default=None)
    parser.add_argument("--humans", type=int, default=None)
    parser.add_argument("--weapons", type=int, default=None)
    parser.add_argument("--houses", type=int, default=None)
    parser.add_argument("--ticks", type=int, default=None)
    parser.add_argument("--runs", type=int, default=None)
    parser.add_argument("--sim-seed", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--weapon-cooldown", type=int, default=None)
    parser.add_argument("--detection-range", type=int, default=None)
    parser.add_argument("--change-direction-probability", type=float, default=None)
    parser.add_argument(
        "--zombie-movement",
        type=str,
        choices=[mode.value for mode in ZombieMovement],
        default=None,
    )
    parser.add_argument("--diagonal-combat", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--write-trace", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--stop-when-resolved",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="End a run as soon as either humans or zombies are gone",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    return parser


def build_run_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> RunConfig:
    """Resolve a RunConfig from parsed CLI args and a loaded config file."""
    pick = partial(_resolve, file_cfg)
    width, height = _parse_grid_size(
        pick(args.grid_size, "grid_size", f"{GRID_WIDTH}x{GRID_HEIGHT}", _coerce_str)
    )
    world = WorldConfig(
        grid_width=width,
        grid_height=height,
        n_zombies=pick(args.zombies, "zombies", NUM_ZOMBIES, _coerce_int),
        n_humans=pick(args.humans, "humans", NUM_HUMANS, _coerce_int),
        n_weapons=pick(args.weapons, "weapons", NUM_WEAPONS, _coerce_int),
        n_houses=pick(args.houses, "houses", NUM_HOUSES, _coerce_int),
    )
    defaults = RuleConfig()
    rules = RuleConfig(
        weapon_cooldown=pick(
            args.weapon_cooldown, "weapon_cooldown", defaults.weapon_cooldown, _coerce_int
        ),
        detection_range=pick(
            args.detection_range, "detection_range", defaults.detection_range, _coerce_int
        ),
        change_direction_probability=pick(
            args.change_direction_probability,
            "change_direction_probability",
            defaults.change_direction_probability,
            _coerce_float,
        ),
        zombie_movement=_parse_zombie_movement(
            pick(
                args.zombie_movement,
                "zombie_movement",
                defaults.zombie_movement.value,
                _coerce_str,
            )
        ),
        diagonal_combat=pick(
            args.diagonal_combat, "diagonal_combat", defaults.diagonal_combat, _coerce_bool
        ),
    )
    return RunConfig.from_components(
        world,
        rules,
        ticks=pick(args.ticks, "ticks", NUM_TICKS, _coerce_int),
        n_runs=pick(args.runs, "runs", 1, _coerce_int),
        sim_seed=pick(args.sim_seed, "sim_seed", 0, _coerce_int),
        write_trace=pick(args.write_trace, "write_trace", True, _coerce_bool),
        stop_when_resolved=pick(
            args.stop_when_resolved, "stop_when_resolved", True, _coerce_bool
        ),
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for batch outbreak runs.

    Supports ``--config path/to/config.json`` for reproducible runs. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    pick = partial(_resolve, file_cfg)
    try:
        log_level = _parse_log_level(pick(args.log_level, "log_level", "WARNING", _coerce_str))
        run_config = build_run_config(args, file_cfg)
        out_dir = Path(pick(args.out_dir, "out_dir", "data", _coerce_str))
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    results = run_simulation(run_config, out_dir)
    summary = {
        "runs": len(results),
        "ticks": run_config.ticks,
        "grid_size": f"{run_config.world.grid_width}x{run_config.world.grid_height}",
        "outcomes": {
            outcome: sum(1 for r in results if r.outcome == outcome)
            for outcome in sorted({r.outcome for r in results})
        },
        "faulted_ticks": sum(r.faulted_ticks for r in results),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
