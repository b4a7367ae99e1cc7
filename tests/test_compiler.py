"""
Unit tests for the YAML description compiler.

These tests validate animation construction from dictionary descriptions,
YAML text and files, including replayed retarget/undo events and the
validation errors raised for malformed input.
"""

import os
import tempfile

import pytest

from anim_core.animation import Duration, Speed, animate, equals, get_duration, is_static
from anim_core.compiler import (
    compile_from_dict,
    compile_from_file,
    compile_from_yaml,
    compile_legs_from_dict,
    compile_legs_from_file,
    compile_legs_from_yaml,
)
from anim_core.config import AnimationConfig
from anim_core.easing import cubic_in_out, sinusoidal_in_out

SCRIPTS_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "scripts"))


class TestCompileFromDict:
    def test_documented_example(self):
        spec = {"start": 0, "delay": 1000, "duration": 4000, "from": 100, "to": 300}
        a = compile_from_dict(spec)

        samples = [animate(t, a) for t in (0, 1000, 2000, 3000, 4000, 5000, 6000)]
        assert samples == pytest.approx([100, 100, 129.29, 200, 270.71, 300, 300], abs=0.01)
        assert a.ease is sinusoidal_in_out

    def test_empty_description_gives_defaults(self):
        a = compile_from_dict({})

        assert a.start == 0
        assert a.from_ == 0
        assert a.to == 1
        assert a.dos == Duration(750)

    def test_config_default_duration(self):
        a = compile_from_dict({}, AnimationConfig(default_duration=300.0))
        assert get_duration(a) == 300.0

    def test_speed_and_ease(self):
        a = compile_from_dict({"speed": -0.5, "ease": "cubic_in_out", "to": 100})

        assert a.dos == Speed(0.5)
        assert a.ease is cubic_in_out
        assert get_duration(a) == pytest.approx(200)

    def test_static_description(self):
        a = compile_from_dict({"static": 4, "start": 50})

        assert is_static(a)
        assert a.start == 50
        assert animate(0, a) == 4

    def test_static_keeps_settings_for_retarget(self):
        spec = {"static": 3, "duration": 2000, "ease": "cubic_in_out", "events": [{"at": 40, "retarget": 9}]}
        legs = compile_legs_from_dict(spec)

        assert is_static(legs[0].animation)
        moved = legs[1].animation
        assert get_duration(moved) == 2000
        assert moved.ease is cubic_in_out
        assert animate(40, moved) == 3
        assert animate(2040, moved) == pytest.approx(9)

    def test_static_with_endpoints_rejected(self):
        with pytest.raises(ValueError, match="'static' together with 'from'/'to'"):
            compile_from_dict({"static": 3, "to": 5})

    def test_non_numeric_top_level_value(self):
        with pytest.raises(ValueError, match="'duration' must be a number"):
            compile_from_dict({"duration": None})
        with pytest.raises(ValueError, match="'from' must be a number"):
            compile_from_dict({"from": "left"})

    def test_duration_and_speed_conflict(self):
        with pytest.raises(ValueError, match="both 'duration' and 'speed'"):
            compile_from_dict({"duration": 100, "speed": 0.1})

    def test_unknown_ease(self):
        with pytest.raises(ValueError, match="Unknown ease"):
            compile_from_dict({"ease": "wobble"})


class TestEvents:
    def test_events_produce_legs_in_clock_order(self):
        spec = {
            "duration": 1000,
            "to": 100,
            "events": [
                {"at": 700, "undo": True},
                {"at": 300, "retarget": 50},
            ],
        }
        legs = compile_legs_from_dict(spec)

        assert [leg.at for leg in legs] == [0, 300, 700]
        assert legs[1].animation.to == 50
        assert legs[1].animation.ramp is not None
        assert legs[2].animation.to == pytest.approx(legs[1].animation.from_)
        assert legs[2].animation.ramp is None

    def test_compile_from_dict_returns_last_leg(self):
        spec = {"duration": 1000, "to": 100, "events": [{"at": 300, "retarget": 50}]}
        final = compile_from_dict(spec)
        legs = compile_legs_from_dict(spec)

        assert equals(final, legs[-1].animation)

    def test_legs_are_continuous_at_event_clocks(self):
        spec = {"duration": 1000, "to": 100, "events": [{"at": 300, "retarget": 50}, {"at": 600, "undo": True}]}
        legs = compile_legs_from_dict(spec)
        for prev, nxt in zip(legs, legs[1:]):
            assert animate(nxt.at, nxt.animation) == pytest.approx(animate(nxt.at, prev.animation))

    def test_event_without_at(self):
        with pytest.raises(ValueError, match="missing 'at'"):
            compile_legs_from_dict({"events": [{"retarget": 3}]})

    def test_event_without_action(self):
        with pytest.raises(ValueError, match="'retarget: <value>' or 'undo: true'"):
            compile_legs_from_dict({"events": [{"at": 10}]})

    def test_event_with_both_actions(self):
        with pytest.raises(ValueError, match="both 'retarget' and 'undo'"):
            compile_legs_from_dict({"events": [{"at": 10, "retarget": 3, "undo": True}]})

    def test_event_not_a_mapping(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            compile_legs_from_dict({"events": ["undo"]})

    def test_retarget_without_value(self):
        with pytest.raises(ValueError, match="Event #0: 'retarget' must be a number"):
            compile_legs_from_dict({"events": [{"at": 10, "retarget": None}]})

    def test_null_at(self):
        with pytest.raises(ValueError, match="Event #1: 'at' must be a number"):
            compile_legs_from_dict({"events": [{"at": 5, "undo": True}, {"at": None, "undo": True}]})

    def test_non_numeric_retarget_from_yaml(self):
        with pytest.raises(ValueError, match="'retarget' must be a number"):
            compile_legs_from_yaml("events:\n  - at: 10\n    retarget: far\n")

    def test_event_before_start(self):
        with pytest.raises(ValueError, match="earlier than start"):
            compile_legs_from_dict({"start": 100, "events": [{"at": 50, "retarget": 3}]})

    def test_event_at_start_is_allowed(self):
        legs = compile_legs_from_dict({"start": 100, "events": [{"at": 100, "retarget": 3}]})
        assert [leg.at for leg in legs] == [100, 100]


class TestCompileFromYamlAndFile:
    def test_compile_from_yaml_text(self):
        yaml_text = """
start: 10
duration: 500
from: 1
to: 2
"""
        a = compile_from_yaml(yaml_text)

        assert a.start == 10
        assert animate(10, a) == 1
        assert animate(510, a) == pytest.approx(2)

    def test_empty_yaml(self):
        a = compile_from_yaml("")
        assert a.to == 1

    def test_non_mapping_yaml(self):
        with pytest.raises(ValueError, match="YAML mapping"):
            compile_from_yaml("- 1\n- 2\n")

    def test_compile_from_file(self):
        yaml_text = "duration: 200\nto: 5\nevents:\n  - at: 100\n    retarget: 1\n"
        with tempfile.TemporaryDirectory() as td:
            path = os.path.join(td, "move.yaml")
            with open(path, "w", encoding="utf-8") as f:
                f.write(yaml_text)

            a = compile_from_file(path)
            legs = compile_legs_from_file(path)

        assert a.to == 1
        assert len(legs) == 2
        assert legs[0].animation.to == 5

    def test_bundled_scenes_compile(self):
        slide = compile_legs_from_file(os.path.join(SCRIPTS_DIR, "slide.yaml"))
        interrupted = compile_legs_from_file(os.path.join(SCRIPTS_DIR, "interrupted.yaml"))

        assert len(slide) == 1
        assert animate(3000, slide[0].animation) == pytest.approx(200)
        assert [leg.at for leg in interrupted] == [0, 800, 1500]

    def test_legs_from_yaml(self):
        legs = compile_legs_from_yaml("static: 3\nevents:\n  - at: 40\n    retarget: 9\n")

        assert is_static(legs[0].animation)
        assert legs[1].animation.start == 40
        assert legs[1].animation.to == 9
