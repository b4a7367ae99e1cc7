"""
Animation value type and its algebra.

An `Animation` describes how a single scalar moves between two endpoints over
time. It is an immutable record: every transformer returns a new value, and
no function in this module keeps state between calls. The caller owns the
clock and passes its current value into every query, typically once per
frame.

The module is organised in the same order an animation is used:
1. Construction: `animation`, `static`
2. Settings: `duration`, `speed`, `delay`, `ease`, `from_`, `to`
3. Sampling and queries: `animate`, lifecycle predicates, time queries
4. Interruptions: `undo`, `retarget`
5. Comparison: `equals`

Clock values are plain floats. By convention they are milliseconds, so the
default duration of 750 means three quarters of a second.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Union

from .config import DEFAULT_CONFIG, AnimationConfig
from .easing import Easing, reverse_ease, sinusoidal_in_out
from .enums import Phase

MS = 1.0
SECOND = 1000.0 * MS


@dataclass(frozen=True)
class Duration:
    """Explicit run time of an animation, in clock units."""

    value: float


@dataclass(frozen=True)
class Speed:
    """Average speed of an animation, in distance per clock unit (never negative)."""

    value: float


DurationOrSpeed = Union[Duration, Speed]


@dataclass(frozen=True, eq=False)
class Animation:
    """
    Immutable description of a scalar interpolation.

    Instances should be built with `animation` or `static` and changed only
    through the transformer functions of this module. Equality is not
    structural because `ease` is a function; use `equals` instead.

    Attributes:
        start: Clock value where the schedule begins
        delay: Offset after start before the run begins (negative after undo)
        dos: Either a Duration or a Speed, resolved against |to - from_|
        ramp: Velocity captured by a mid-flight retarget, else None
        ease: Easing function mapping [0, 1] onto [0, 1]
        from_: Origin value
        to: Destination value
    """

    start: float
    """Clock value where the schedule begins."""

    delay: float
    """Offset added after start before the run phase begins."""

    dos: DurationOrSpeed
    """Duration or average speed; the two are mutually exclusive."""

    ramp: Optional[float]
    """Velocity blended out after a retarget of a running animation."""

    ease: Easing
    """Easing function with ease(0) == 0 and ease(1) == 1."""

    from_: float
    """Origin value."""

    to: float
    """Destination value."""


# ----- construction -----
def animation(t: float, config: AnimationConfig | None = None) -> Animation:
    """
    Create an animation that starts at clock `t`.

    Defaults: no delay, the configured default duration (750 ms), the
    sinusoidal in/out ease, and endpoints 0 -> 1.
    """
    cfg = config or DEFAULT_CONFIG
    return Animation(
        start=t,
        delay=0.0,
        dos=Duration(cfg.default_duration),
        ramp=None,
        ease=sinusoidal_in_out,
        from_=0.0,
        to=1.0,
    )


def static(v: float, config: AnimationConfig | None = None) -> Animation:
    """
    Create an animation that sits at `v` forever.

    A static animation is always done and never scheduled or running,
    whatever the clock.
    """
    cfg = config or DEFAULT_CONFIG
    return Animation(
        start=0.0,
        delay=0.0,
        dos=Duration(cfg.default_duration),
        ramp=None,
        ease=sinusoidal_in_out,
        from_=v,
        to=v,
    )


# ----- settings -----
def duration(x: float, anim: Animation) -> Animation:
    """Set the run time, replacing any speed previously set."""
    return replace(anim, dos=Duration(x))


def speed(x: float, anim: Animation) -> Animation:
    """Set the average speed, replacing any duration previously set. The sign is ignored."""
    return replace(anim, dos=Speed(abs(x)))


def delay(x: float, anim: Animation) -> Animation:
    return replace(anim, delay=x)


def ease(f: Easing, anim: Animation) -> Animation:
    return replace(anim, ease=f)


def from_(x: float, anim: Animation) -> Animation:
    """Set the origin value. Clears any ramp left over from a retarget."""
    return replace(anim, from_=x, ramp=None)


def to(x: float, anim: Animation) -> Animation:
    """Set the destination value. Clears any ramp left over from a retarget."""
    return replace(anim, to=x, ramp=None)


# ----- getters -----
def _resolve_duration(dos: DurationOrSpeed, frm: float, dst: float) -> float:
    if isinstance(dos, Duration):
        return dos.value
    distance = abs(dst - frm)
    if distance == 0:
        return 0.0
    if dos.value == 0:
        # Never arrives
        return math.inf
    return distance / dos.value


def _resolve_speed(dos: DurationOrSpeed, frm: float, dst: float) -> float:
    if isinstance(dos, Speed):
        return dos.value
    distance = abs(dst - frm)
    if distance == 0:
        return 0.0
    if dos.value <= 0:
        return math.inf
    return distance / dos.value


def get_start(anim: Animation) -> float:
    return anim.start


def get_delay(anim: Animation) -> float:
    return anim.delay


def get_duration(anim: Animation) -> float:
    """Return the run time, converting from speed when a speed was set."""
    return _resolve_duration(anim.dos, anim.from_, anim.to)


def get_speed(anim: Animation) -> float:
    """Return the average speed, converting from duration when a duration was set."""
    return _resolve_speed(anim.dos, anim.from_, anim.to)


def get_ease(anim: Animation) -> Easing:
    return anim.ease


def get_from(anim: Animation) -> float:
    return anim.from_


def get_to(anim: Animation) -> float:
    return anim.to


def is_static(anim: Animation) -> bool:
    """Return True when both endpoints are equal."""
    return anim.from_ == anim.to


# ----- sampling -----
def _cosine_ease(x: float) -> float:
    # Fixed curve for blending out a retarget ramp; independent of anim.ease
    return 0.5 * (1 - math.cos(math.pi * x))


def _fraction(elapsed: float, span: float) -> float:
    if span <= 0:
        return 1.0
    return max(0.0, min(1.0, elapsed / span))


def animate(clock: float, anim: Animation) -> float:
    """
    Sample the animated value at `clock`.

    The value stays at `from_` until start + delay, eases toward `to` over the
    duration, and stays at `to` afterwards. When the animation carries a ramp
    from a retarget, a correction term continues the captured velocity
    linearly and fades it out with a cosine curve as the new leg progresses.

    Args:
        clock: Current clock value supplied by the caller
        anim: Animation to sample

    Returns:
        float: The interpolated value
    """
    span = _resolve_duration(anim.dos, anim.from_, anim.to)
    fraction = _fraction(clock - anim.start - anim.delay, span)
    eased = anim.ease(fraction)

    correction = 0.0
    if anim.ramp is not None:
        linear_portion = anim.ramp * (clock - anim.start)
        correction = linear_portion - linear_portion * _cosine_ease(fraction)

    return anim.from_ + (anim.to - anim.from_) * eased + correction


# ----- lifecycle -----
def is_scheduled(clock: float, anim: Animation) -> bool:
    """True while the clock has not passed start + delay (never for static animations)."""
    if is_static(anim):
        return False
    return clock <= anim.start + anim.delay


def is_running(clock: float, anim: Animation) -> bool:
    """True while the clock lies strictly inside the run window (never for static animations)."""
    if is_static(anim):
        return False
    begin = anim.start + anim.delay
    return begin < clock < begin + get_duration(anim)


def is_done(clock: float, anim: Animation) -> bool:
    """True once the run window is over. Static animations are always done."""
    if is_static(anim):
        return True
    return anim.start + anim.delay + get_duration(anim) <= clock


def phase(clock: float, anim: Animation) -> Phase:
    """
    Return the single lifecycle phase of `anim` at `clock`.

    With a zero duration the scheduled and done windows touch at
    start + delay; that instant is reported as SCHEDULED.
    """
    if is_static(anim):
        return Phase.DONE
    if is_scheduled(clock, anim):
        return Phase.SCHEDULED
    if is_done(clock, anim):
        return Phase.DONE
    return Phase.RUNNING


def time_elapsed(clock: float, anim: Animation) -> float:
    """Time spent running so far; 0 while scheduled and for static animations."""
    if is_static(anim):
        return 0.0
    return max(0.0, clock - (anim.start + anim.delay))


def time_remaining(clock: float, anim: Animation) -> float:
    """Time left until done, including any remaining delay; never negative."""
    if is_static(anim):
        return 0.0
    return max(0.0, anim.start + anim.delay + get_duration(anim) - clock)


def get_velocity(clock: float, anim: Animation, config: AnimationConfig | None = None) -> float:
    """
    Estimate d(value)/d(clock) at `clock` with a central difference.

    The half-step is `config.velocity_step` clock units (10 by default).
    """
    h = (config or DEFAULT_CONFIG).velocity_step
    backward = animate(clock - h, anim)
    forward = animate(clock + h, anim)
    return (forward - backward) / (2 * h)


# ----- interruptions -----
def undo(clock: float, anim: Animation) -> Animation:
    """
    Reverse the animation starting at `clock`.

    The endpoints are swapped and the ease is reflected, so the reversed
    motion mirrors the forward acceleration profile. The delay becomes the
    negated time remaining: whatever was left of the forward run is already
    "elapsed" in the reversed one, so an undo mid-flight heads back at once
    instead of restarting the full duration. An animation undone before it
    began returns to its origin immediately.
    """
    return replace(
        anim,
        from_=anim.to,
        to=anim.from_,
        start=clock,
        delay=-time_remaining(clock, anim),
        ramp=None,
        ease=reverse_ease(anim.ease),
    )


def retarget(clock: float, new_to: float, anim: Animation, config: AnimationConfig | None = None) -> Animation:
    """
    Change the destination to `new_to` at `clock` without a jump in position or velocity.

    Cases, checked in order:
    1. Same destination: returned unchanged.
    2. Static: becomes a fresh move from its value starting at `clock`.
    3. Scheduled: only the destination changes; the schedule is kept.
    4. Done: a new leg starts at `clock` from the settled value.
    5. Running: a new leg starts at the current position, keeping the
       average speed of the old leg and carrying the current velocity in
       `ramp` so it can be blended out smoothly.

    Args:
        clock: Clock value at which the retarget happens
        new_to: New destination value
        anim: Animation to retarget
        config: Optional configuration (velocity estimation step)

    Returns:
        Animation: The retargeted animation
    """
    if new_to == anim.to:
        return anim
    if is_static(anim):
        return replace(anim, start=clock, to=new_to, ramp=None)
    if is_scheduled(clock, anim):
        return replace(anim, to=new_to, ramp=None)
    if is_done(clock, anim):
        return replace(anim, start=clock, delay=0.0, from_=anim.to, to=new_to, ramp=None)

    vel = get_velocity(clock, anim, config)
    pos = animate(clock, anim)
    if isinstance(anim.dos, Speed):
        new_speed = anim.dos
    else:
        new_speed = Speed(_resolve_speed(anim.dos, anim.from_, anim.to))
    return Animation(
        start=clock,
        delay=0.0,
        dos=new_speed,
        ramp=vel,
        ease=anim.ease,
        from_=pos,
        to=new_to,
    )


# ----- comparison -----
def equals(a: Animation, b: Animation, config: AnimationConfig | None = None) -> bool:
    """
    Approximate semantic equality of two animations.

    Compares the effective start (start + delay), the endpoints, the ramp
    and the resolved duration (so a duration and an equivalent speed
    compare equal). Easing functions cannot be compared directly, so both
    are sampled at a few probe points; two different curves that agree at
    every probe compare equal. Suitable for tests and debugging, not for
    logic that depends on exact equality.
    """
    cfg = config or DEFAULT_CONFIG

    def close(x: float, y: float) -> bool:
        return math.isclose(x, y, rel_tol=0.0, abs_tol=cfg.float_tolerance)

    if not close(a.start + a.delay, b.start + b.delay):
        return False
    if not (close(a.from_, b.from_) and close(a.to, b.to)):
        return False
    if (a.ramp is None) != (b.ramp is None):
        return False
    if a.ramp is not None and not close(a.ramp, b.ramp):
        return False

    if a.dos != b.dos:
        dur_a = get_duration(a)
        dur_b = get_duration(b)
        if not (dur_a == dur_b or abs(dur_a - dur_b) <= cfg.duration_tolerance):
            return False

    return all(close(a.ease(p), b.ease(p)) for p in cfg.ease_probe_points)
