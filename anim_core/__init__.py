"""
anim_core Package.

This package implements a pure, immutable animation value type for a single
scalar, including:

- Construction and settings (animation, static, duration, speed, delay, ...)
- Sampling and lifecycle queries (animate, is_running, time_remaining, ...)
- Smooth interruptions (retarget, undo)
- Named easing functions
- A YAML description compiler and numpy sampling helpers

The caller owns the clock: every query takes the current clock value, and no
function keeps state between calls.
"""

__version__ = "0.1.0"

from .enums import Phase, EventKind
from .config import AnimationConfig, DEFAULT_CONFIG
from .animation import (
    MS,
    SECOND,
    Animation,
    Duration,
    Speed,
    animation,
    static,
    duration,
    speed,
    delay,
    ease,
    from_,
    to,
    get_start,
    get_delay,
    get_duration,
    get_speed,
    get_ease,
    get_from,
    get_to,
    is_static,
    animate,
    is_scheduled,
    is_running,
    is_done,
    phase,
    time_elapsed,
    time_remaining,
    get_velocity,
    undo,
    retarget,
    equals,
)
from .compiler import (
    Leg,
    compile_from_dict,
    compile_from_yaml,
    compile_from_file,
    compile_legs_from_dict,
    compile_legs_from_yaml,
    compile_legs_from_file,
)
from .sampling import clock_grid, sample, sample_range, velocities, phases, active_leg, sample_legs
