"""
Vectorised sampling helpers for anim_core.

The core `animate` function samples one clock value at a time. These helpers
evaluate an animation, or a sequence of interrupted legs produced by the
compiler, over many clock values at once and return numpy arrays, which is
what plotting and export code usually wants.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .animation import Animation, animate, get_velocity, phase
from .compiler import Leg
from .config import AnimationConfig
from .enums import Phase


def sample(anim: Animation, clocks: Iterable[float]) -> np.ndarray:
    """Return `animate(clock, anim)` for every clock value as a float array."""
    clocks = np.asarray(list(clocks), dtype=float)
    return np.fromiter((animate(float(c), anim) for c in clocks), dtype=float, count=clocks.size)


def clock_grid(t0: float, t1: float, step: float) -> np.ndarray:
    """
    Return the regular clock grid t0, t0 + step, ... up to and including `t1`.

    `t1` is included when it falls on the grid (within float noise); a
    reversed range gives an empty grid.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    count = int(np.floor((t1 - t0) / step + 1e-9)) + 1
    return t0 + step * np.arange(max(count, 0), dtype=float)


def sample_range(anim: Animation, t0: float, t1: float, step: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample `anim` on a regular grid from `t0` to `t1` inclusive.

    Args:
        anim: Animation to sample
        t0: First clock value
        t1: Last clock value (included when it falls on the grid)
        step: Grid spacing, must be positive

    Returns:
        (clocks, values) arrays of equal length
    """
    clocks = clock_grid(t0, t1, step)
    return clocks, sample(anim, clocks)


def velocities(anim: Animation, clocks: Iterable[float], config: AnimationConfig | None = None) -> np.ndarray:
    """Return the central-difference velocity at every clock value."""
    clocks = np.asarray(list(clocks), dtype=float)
    return np.fromiter(
        (get_velocity(float(c), anim, config) for c in clocks), dtype=float, count=clocks.size
    )


def phases(anim: Animation, clocks: Iterable[float]) -> List[Phase]:
    return [phase(float(c), anim) for c in clocks]


def active_leg(legs: Sequence[Leg], clock: float) -> Animation:
    """
    Return the animation in effect at `clock`.

    That is the latest leg whose `at` is not after `clock`; before the first
    event the first leg applies, even for clocks earlier than its `at`.
    """
    if not legs:
        raise ValueError("active_leg requires at least one leg")
    current = legs[0].animation
    for leg in legs[1:]:
        if leg.at > clock:
            break
        current = leg.animation
    return current


def sample_legs(legs: Sequence[Leg], clocks: Iterable[float]) -> np.ndarray:
    """Sample an interrupted sequence of legs, switching leg at each event clock."""
    clocks = np.asarray(list(clocks), dtype=float)
    return np.fromiter(
        (animate(float(c), active_leg(legs, float(c))) for c in clocks), dtype=float, count=clocks.size
    )
