#!/usr/bin/env python3
"""
anim_core CLI

Usage modes:
- Default run: compile a YAML description, sample it on a clock grid, print JSON
- Dry run: compile only and print a summary of the resulting legs
- Utility: list sample scenes, show version
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from glob import glob
from pathlib import Path
from typing import Any, Dict, List

from anim_core import __version__
from anim_core.animation import get_duration, get_from, get_to, phase, time_remaining
from anim_core.compiler import compile_legs_from_file
from anim_core.config import AnimationConfig
from anim_core.sampling import active_leg, clock_grid, sample_legs


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Compile an animation description from YAML and dump samples as JSON",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Utilities / meta
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v, -vv)")
    p.add_argument("--list-scenes", action="store_true", help="List bundled sample YAML scenes and exit")

    # Primary input
    p.add_argument("yaml", nargs="?", help="Path to YAML description (e.g., scripts/slide.yaml)")

    # Sampling grid
    p.add_argument("--from-clock", type=float, default=None, help="First clock value (defaults to the start of the first leg)")
    p.add_argument("--until", type=float, default=None, help="Last clock value (defaults to when the last leg is done)")
    p.add_argument("--step", type=float, default=100.0, help="Clock spacing between samples")
    p.add_argument("--dry-run", action="store_true", help="Compile only; do not sample")
    p.add_argument("--out", type=str, default="", help="Optional output JSON file path")

    # Config overrides
    p.add_argument("--default-duration", type=float, default=None, help="Duration used when the description sets none")
    p.add_argument("--velocity-step", type=float, default=None, help="Half-step of the velocity estimate used by retarget")

    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> AnimationConfig:
    cfg = AnimationConfig()
    if args.default_duration is not None:
        cfg.default_duration = float(args.default_duration)
    if args.velocity_step is not None:
        cfg.velocity_step = float(args.velocity_step)
    return cfg


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def find_sample_scenes() -> List[str]:
    here = Path(__file__).resolve()
    repo_root = here.parent.parent
    candidates = []
    for base in [repo_root, here.parent]:
        candidates.extend(sorted(glob(str(base / "*.yaml"))))
        candidates.extend(sorted(glob(str(base / "scripts" / "*.yaml"))))
    seen = set()
    result = []
    for c in candidates:
        if c not in seen:
            seen.add(c)
            result.append(c)
    return result


def _write(payload: Dict[str, Any], out: str) -> None:
    if out:
        with open(out, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
    else:
        print(json.dumps(payload, indent=2))


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.version:
        print(__version__)
        return 0

    if args.list_scenes:
        print(json.dumps(find_sample_scenes(), indent=2))
        return 0

    if not args.yaml:
        print("error: missing YAML path (try --list-scenes)", file=sys.stderr)
        return 2

    if not Path(args.yaml).is_file():
        print(f"error: no such file: {args.yaml}", file=sys.stderr)
        return 2

    cfg = build_config(args)

    logging.info("Compiling animation from %s", args.yaml)
    try:
        legs = compile_legs_from_file(args.yaml, cfg)
    except ValueError as exc:
        logging.error("Invalid description %s: %s", args.yaml, exc)
        return 1
    logging.info("Compiled %d leg(s)", len(legs))

    if args.dry_run:
        summary = {
            "legs": [
                {
                    "at": leg.at,
                    "from": get_from(leg.animation),
                    "to": get_to(leg.animation),
                    "duration": get_duration(leg.animation),
                }
                for leg in legs
            ]
        }
        _write(summary, args.out)
        return 0

    t0 = args.from_clock if args.from_clock is not None else legs[0].at
    if args.until is not None:
        t1 = args.until
    else:
        last = legs[-1]
        t1 = last.at + time_remaining(last.at, last.animation)
    if args.step <= 0:
        print("error: --step must be positive", file=sys.stderr)
        return 2
    logging.debug("Sampling clock range [%s, %s] step %s", t0, t1, args.step)

    if not math.isfinite(t1):
        print("error: animation never finishes; pass --until", file=sys.stderr)
        return 2

    clocks = [float(c) for c in clock_grid(t0, t1, args.step)]
    values = sample_legs(legs, clocks)

    payload: Dict[str, Any] = {
        "clock": clocks,
        "value": [float(v) for v in values],
        "phase": [phase(c, active_leg(legs, c)).name for c in clocks],
    }
    _write(payload, args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
