"""
Core enumerations for the anim_core animation library.

This module defines the lifecycle phases an animation moves through and the
kinds of interruption events understood by the description compiler.
"""

from enum import Enum, auto


class Phase(Enum):
    """
    Lifecycle phase of a non-static animation at a given clock value.

    Phases are never stored on an animation; they are derived by comparing
    the clock against the animation's schedule:
    - SCHEDULED: the clock has not yet passed start + delay
    - RUNNING: the clock lies strictly inside the run window
    - DONE: the run window has been fully covered (static animations are
      always DONE)
    """

    SCHEDULED = auto()
    """Waiting for start + delay to pass."""

    RUNNING = auto()
    """Interpolating between the endpoints."""

    DONE = auto()
    """Settled on the destination value."""


class EventKind(Enum):
    """
    Interruption events that can be applied to a running description.

    - RETARGET: change the destination value without a velocity jump
    - UNDO: reverse the animation back toward its origin
    """

    RETARGET = auto()
    """Aim the animation at a new destination."""

    UNDO = auto()
    """Reverse the animation in place."""
