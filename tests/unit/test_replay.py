"""Tests for replay helpers used by sinks."""

import pytest

from sortrecorder.constants import MAX_ANIMATION_SPEED, MIN_ANIMATION_SPEED
from sortrecorder.dispatcher import record_animation
from sortrecorder.replay import (
    Frame,
    ReplayConfig,
    apply_steps,
    highlighted_lines,
    iter_frames,
)
from sortrecorder.step_types import AnimationStep


class TestApplySteps:
    def test_comparisons_do_not_change_array(self):
        steps = [AnimationStep.compare(0, 1), AnimationStep.compare(1)]
        assert apply_steps([2, 1], steps) == [2, 1]

    def test_writes_applied_in_order(self):
        steps = [AnimationStep.write(0, 5), AnimationStep.write(0, 6)]
        assert apply_steps([1, 2], steps) == [6, 2]

    def test_original_untouched(self):
        values = [2, 1]
        apply_steps(values, [AnimationStep.write(0, 1)])
        assert values == [2, 1]


class TestIterFrames:
    def test_one_frame_per_step(self):
        recorded = record_animation("bubble", [2, 1])
        frames = list(iter_frames([2, 1], recorded))
        assert [f.step_index for f in frames] == [0, 1, 2]
        assert all(isinstance(f, Frame) for f in frames)

    def test_frames_track_array_state(self):
        recorded = record_animation("bubble", [2, 1])
        frames = list(iter_frames([2, 1], recorded))
        assert [f.array for f in frames] == [(2, 1), (1, 1), (1, 2)]

    def test_last_frame_is_sorted(self):
        values = [9, 4, 7, 1]
        recorded = record_animation("heap", values)
        *_, last = iter_frames(values, recorded)
        assert list(last.array) == sorted(values)


class TestHighlightedLines:
    def test_maps_trace_to_listing(self):
        recorded = record_animation("bubble", [2, 1])
        assert highlighted_lines(recorded) == [
            "for i from 0 to n-1",
            "  for j from 0 to n-i-1",
            "    if array[j] > array[j+1]",
            "      swap(array[j], array[j+1])",
        ]

    @pytest.mark.parametrize("name", ["heap", "radix"])
    def test_every_emitted_index_has_text(self, name):
        recorded = record_animation(name, [30, 4, 17, 8, 22])
        assert len(highlighted_lines(recorded)) == len(recorded.pseudocode_trace)


class TestReplayConfig:
    def test_default_within_bounds(self):
        assert MIN_ANIMATION_SPEED <= ReplayConfig().speed <= MAX_ANIMATION_SPEED

    def test_speed_clamped_low(self):
        assert ReplayConfig(speed=0.01).speed == MIN_ANIMATION_SPEED

    def test_speed_clamped_high(self):
        assert ReplayConfig(speed=10_000).speed == MAX_ANIMATION_SPEED

    def test_step_delay_in_seconds(self):
        assert ReplayConfig(speed=250).step_delay_seconds == pytest.approx(0.25)
