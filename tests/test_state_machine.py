"""
Tests for the derived lifecycle of animations.

Validates the scheduled -> running -> done progression, boundary behaviour
at start + delay and at completion, static animations, and the time queries
that depend on the same schedule.
"""

import math

import pytest

from anim_core.animation import (
    animation,
    delay,
    duration,
    is_done,
    is_running,
    is_scheduled,
    phase,
    speed,
    static,
    time_elapsed,
    time_remaining,
)
from anim_core.enums import Phase


def delayed():
    """Starts at 100, runs from 300 to 1300."""
    return delay(200, duration(1000, animation(100)))


class TestPhasePredicates:
    def test_progression(self):
        a = delayed()

        assert is_scheduled(150, a) and not is_running(150, a) and not is_done(150, a)
        assert is_running(800, a) and not is_scheduled(800, a) and not is_done(800, a)
        assert is_done(2000, a) and not is_scheduled(2000, a) and not is_running(2000, a)

    def test_boundary_at_run_start(self):
        a = delayed()

        assert is_scheduled(300, a)
        assert not is_running(300, a)
        assert not is_done(300, a)

    def test_boundary_at_completion(self):
        a = delayed()

        assert is_done(1300, a)
        assert not is_running(1300, a)
        assert not is_scheduled(1300, a)

    @pytest.mark.parametrize("clock", list(range(0, 2000, 50)))
    def test_exactly_one_phase(self, clock):
        a = delayed()
        flags = [is_scheduled(clock, a), is_running(clock, a), is_done(clock, a)]
        assert sum(flags) == 1

    @pytest.mark.parametrize("clock", [-1e6, -1, 0, 1, 375, 750, 1e6])
    def test_static_is_always_done(self, clock):
        s = static(4)

        assert is_done(clock, s)
        assert not is_running(clock, s)
        assert not is_scheduled(clock, s)
        assert phase(clock, s) == Phase.DONE

    def test_zero_duration_overlap(self):
        """Scheduled and done touch at start + delay when the duration is zero."""
        a = duration(0, animation(0))

        assert is_scheduled(0, a)
        assert is_done(0, a)
        assert not is_running(0, a)
        assert phase(0, a) == Phase.SCHEDULED
        assert phase(1, a) == Phase.DONE

    def test_zero_speed_never_done(self):
        a = speed(0, animation(0))

        assert is_running(1e9, a)
        assert not is_done(1e9, a)


class TestPhase:
    def test_phase_matches_predicates(self):
        a = delayed()

        assert phase(100, a) == Phase.SCHEDULED
        assert phase(300, a) == Phase.SCHEDULED
        assert phase(301, a) == Phase.RUNNING
        assert phase(1299, a) == Phase.RUNNING
        assert phase(1300, a) == Phase.DONE


class TestTimeQueries:
    def test_time_elapsed(self):
        a = delayed()

        assert time_elapsed(0, a) == 0
        assert time_elapsed(300, a) == 0
        assert time_elapsed(500, a) == 200
        # Keeps counting after completion
        assert time_elapsed(2000, a) == 1700

    def test_time_remaining(self):
        a = delayed()

        assert time_remaining(100, a) == 1200
        assert time_remaining(600, a) == 700
        assert time_remaining(1300, a) == 0
        assert time_remaining(5000, a) == 0

    def test_time_remaining_decreases_linearly(self):
        a = delayed()
        values = [time_remaining(t, a) for t in (100, 400, 700, 1000)]
        diffs = [x - y for x, y in zip(values, values[1:])]
        assert diffs == [300, 300, 300]

    def test_static_time_queries(self):
        s = static(1)

        assert time_elapsed(500, s) == 0
        assert time_remaining(500, s) == 0

    def test_infinite_remaining_for_zero_speed(self):
        a = speed(0, animation(0))
        assert math.isinf(time_remaining(10, a))
