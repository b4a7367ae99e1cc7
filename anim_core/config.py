"""
Configuration objects for anim_core.

Exposes the numeric constants used by construction, velocity estimation and
equality checks, enabling experiments without editing core logic.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass
class AnimationConfig:
    """
    Tunable constants for animation construction and comparison.

    Defaults match the behaviour expected by callers that never pass a
    config, so functions fall back to `DEFAULT_CONFIG` when given None.
    """

    # Construction
    default_duration: float = 750.0

    # Central-difference half-step used by get_velocity (clock units)
    velocity_step: float = 10.0

    # Equality
    duration_tolerance: float = 0.001
    float_tolerance: float = 1e-9
    ease_probe_points: Tuple[float, ...] = (0.1, 0.3, 0.7, 0.9)


DEFAULT_CONFIG = AnimationConfig()
