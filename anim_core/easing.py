"""
Easing functions for anim_core.

Every easing maps normalised progress in [0, 1] to eased progress, with
ease(0) == 0 and ease(1) == 1. Functions are plain callables so they can be
stored directly on an `Animation`.
"""

from __future__ import annotations

import math
from typing import Callable, Dict

Easing = Callable[[float], float]


def linear(t: float) -> float:
    """Linear easing."""
    return t


def sinusoidal_in_out(t: float) -> float:
    """Half-cosine curve; the default easing for new animations."""
    return (1 - math.cos(math.pi * t)) / 2


def sinusoidal_in(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def sinusoidal_out(t: float) -> float:
    return math.sin(t * math.pi / 2)


def quad_in(t: float) -> float:
    return t * t


def quad_out(t: float) -> float:
    return t * (2 - t)


def quad_in_out(t: float) -> float:
    return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    return 1 - (1 - t) ** 3


def cubic_in_out(t: float) -> float:
    return 4 * t * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def smoothstep(t: float) -> float:
    """Smoothstep easing for gentle ease-in/out."""
    return t * t * (3 - 2 * t)


def reverse_ease(f: Easing) -> Easing:
    """
    Reflect an easing curve through the centre of the unit square.

    Running an animation backwards with the reflected curve mirrors the
    forward acceleration profile, so an ease-in played in reverse reads as
    an ease-out.

    Args:
        f: Easing function to reflect

    Returns:
        Easing function computing 1 - f(1 - t)
    """

    def reversed_ease(t: float) -> float:
        return 1 - f(1 - t)

    return reversed_ease


EASING_FUNCTIONS: Dict[str, Easing] = {
    "linear": linear,
    "sinusoidal_in_out": sinusoidal_in_out,
    "sinusoidal_in": sinusoidal_in,
    "sinusoidal_out": sinusoidal_out,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "quad_in_out": quad_in_out,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_in_out": cubic_in_out,
    "smoothstep": smoothstep,
}


def get_easing(name: str) -> Easing:
    """Look up an easing function by registry name, raising ValueError if unknown."""
    try:
        return EASING_FUNCTIONS[name]
    except KeyError:
        known = ", ".join(sorted(EASING_FUNCTIONS))
        raise ValueError(f"Unknown ease '{name}' (known: {known})") from None


__all__ = [
    "Easing",
    "linear",
    "sinusoidal_in_out",
    "sinusoidal_in",
    "sinusoidal_out",
    "quad_in",
    "quad_out",
    "quad_in_out",
    "cubic_in",
    "cubic_out",
    "cubic_in_out",
    "smoothstep",
    "reverse_ease",
    "EASING_FUNCTIONS",
    "get_easing",
]
