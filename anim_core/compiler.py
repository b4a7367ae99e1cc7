"""
YAML description compiler for anim_core animations.

This module compiles a small declarative description into an `Animation`,
optionally replaying a list of timed interruptions (retarget / undo) on it.

YAML schema:

start: 0              # default 0
delay: 1000           # default 0
duration: 4000        # or `speed`, never both
ease: sinusoidal_in_out
from: 100             # default 0
to: 300               # default 1
static: 5             # optional; a static animation at this value
events:
  - at: 2500
    retarget: 50
  - at: 3000
    undo: true

Notes:
- Ease names come from `anim_core.easing.EASING_FUNCTIONS`.
- `static` excludes `from`/`to`; its `duration`, `speed` and `ease` apply to
  the move started by a later retarget.
- Events are applied in order of their `at` clock value; events sharing a
  clock keep their listed order. An event earlier than `start` is rejected.
- Numeric fields must be numbers; anything else raises ValueError.
- Each event produces a new leg. `compile_legs_*` returns every leg so that
  a caller can sample the interrupted motion over time; `compile_from_*`
  returns only the last one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Tuple

import yaml

from .animation import Animation, animation, delay, duration, ease, from_, retarget, speed, static, to, undo
from .config import AnimationConfig
from .easing import get_easing
from .enums import EventKind


@dataclass(frozen=True)
class Leg:
    """An animation together with the clock value from which it applies."""

    at: float
    animation: Animation


def _number(value: Any, where: str) -> float:
    """Coerce a description value to float, raising ValueError naming `where`."""
    if value is None or isinstance(value, bool):
        raise ValueError(f"{where} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{where} must be a number, got {value!r}") from None


def _build_initial(spec: Dict[str, Any], config: AnimationConfig | None) -> Animation:
    if "duration" in spec and "speed" in spec:
        raise ValueError("Description sets both 'duration' and 'speed'; choose one")

    start = _number(spec.get("start", 0.0), "'start'")
    if "static" in spec:
        if "from" in spec or "to" in spec:
            raise ValueError("Description sets 'static' together with 'from'/'to'; choose one")
        # static() pins start at 0; keep the described start so retargets line up
        anim = replace(static(_number(spec["static"], "'static'"), config), start=start)
    else:
        anim = animation(start, config)

    if "delay" in spec:
        anim = delay(_number(spec["delay"], "'delay'"), anim)
    if "duration" in spec:
        anim = duration(_number(spec["duration"], "'duration'"), anim)
    if "speed" in spec:
        anim = speed(_number(spec["speed"], "'speed'"), anim)
    if "ease" in spec:
        anim = ease(get_easing(str(spec["ease"])), anim)
    if "from" in spec:
        anim = from_(_number(spec["from"], "'from'"), anim)
    if "to" in spec:
        anim = to(_number(spec["to"], "'to'"), anim)
    return anim


def _parse_event(raw: Any, index: int) -> Tuple[float, EventKind, float | None]:
    if not isinstance(raw, dict):
        raise ValueError(f"Event #{index} must be a mapping, got {type(raw).__name__}")
    if "at" not in raw:
        raise ValueError(f"Event #{index} is missing 'at'")
    at = _number(raw["at"], f"Event #{index}: 'at'")
    if "retarget" in raw and raw.get("undo"):
        raise ValueError(f"Event #{index} sets both 'retarget' and 'undo'")
    if "retarget" in raw:
        return at, EventKind.RETARGET, _number(raw["retarget"], f"Event #{index}: 'retarget'")
    if raw.get("undo"):
        return at, EventKind.UNDO, None
    raise ValueError(f"Event #{index} must set 'retarget: <value>' or 'undo: true'")


def compile_legs_from_dict(spec: Dict[str, Any], config: AnimationConfig | None = None) -> List[Leg]:
    """
    Compile a parsed description into its list of legs.

    Args:
        spec: Parsed YAML dictionary
        config: Optional configuration used for construction and retargets

    Returns:
        List[Leg]: The initial animation (at its start clock) followed by one
        leg per event, in clock order

    Raises:
        ValueError: On malformed values, or an event earlier than `start`
    """
    initial = _build_initial(spec, config)
    legs = [Leg(at=initial.start, animation=initial)]

    events = [_parse_event(raw, i) for i, raw in enumerate(spec.get("events", []) or [])]
    for i, (at, _, _) in enumerate(events):
        if at < initial.start:
            raise ValueError(f"Event #{i} at {at} is earlier than start {initial.start}")

    current = initial
    for at, kind, value in sorted(events, key=lambda e: e[0]):
        if kind == EventKind.RETARGET:
            current = retarget(at, value, current, config)
        else:
            current = undo(at, current)
        legs.append(Leg(at=at, animation=current))
    return legs


def compile_from_dict(spec: Dict[str, Any], config: AnimationConfig | None = None) -> Animation:
    """Compile a parsed description into the animation left after all events."""
    return compile_legs_from_dict(spec, config)[-1].animation


def _load_yaml(yaml_text: str) -> Dict[str, Any]:
    data = yaml.safe_load(yaml_text) or {}
    if not isinstance(data, dict):
        raise ValueError("Animation description must be a YAML mapping")
    return data


def compile_from_yaml(yaml_text: str, config: AnimationConfig | None = None) -> Animation:
    """Compile from YAML text into an `Animation`."""
    return compile_from_dict(_load_yaml(yaml_text), config)


def compile_legs_from_yaml(yaml_text: str, config: AnimationConfig | None = None) -> List[Leg]:
    """Compile from YAML text into a list of legs."""
    return compile_legs_from_dict(_load_yaml(yaml_text), config)


def compile_from_file(path: str, config: AnimationConfig | None = None) -> Animation:
    """Compile from a YAML file path into an `Animation`."""
    with open(path, "r", encoding="utf-8") as f:
        txt = f.read()
    return compile_from_yaml(txt, config)


def compile_legs_from_file(path: str, config: AnimationConfig | None = None) -> List[Leg]:
    """Compile from a YAML file path into a list of legs."""
    with open(path, "r", encoding="utf-8") as f:
        txt = f.read()
    return compile_legs_from_yaml(txt, config)
