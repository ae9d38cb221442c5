"""Tests for AnimationStep construction, validation and wire shape."""

import pytest
from pydantic import ValidationError

from sortrecorder.step_types import AnimationStep


class TestComparisonStep:
    def test_compare_builds_non_write_step(self):
        step = AnimationStep.compare(0, 1)
        assert step.is_write is False
        assert step.payload == (0, 1)

    def test_indices_for_comparison(self):
        assert AnimationStep.compare(2, 3, 4).indices == (2, 3, 4)

    def test_single_index_allowed(self):
        assert AnimationStep.compare(5).payload == (5,)

    def test_no_indices_rejected(self):
        with pytest.raises(ValidationError):
            AnimationStep.compare()

    def test_four_indices_rejected(self):
        with pytest.raises(ValidationError):
            AnimationStep.compare(0, 1, 2, 3)

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            AnimationStep.compare(-1, 0)

    def test_value_not_available(self):
        with pytest.raises(AttributeError):
            AnimationStep.compare(0, 1).value


class TestWriteStep:
    def test_write_builds_write_step(self):
        step = AnimationStep.write(3, 42)
        assert step.is_write is True
        assert step.index == 3
        assert step.value == 42

    def test_float_value_kept(self):
        assert AnimationStep.write(0, 2.5).value == 2.5

    def test_indices_for_write_is_target_only(self):
        assert AnimationStep.write(4, 99).indices == (4,)

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            AnimationStep.write(-1, 3)

    def test_wrong_payload_length_rejected(self):
        with pytest.raises(ValidationError):
            AnimationStep(payload=(1, 2, 3), is_write=True)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            AnimationStep.write(-2, 0)


class TestWireShape:
    def test_comparison_to_wire(self):
        assert AnimationStep.compare(0, 1).to_wire() == [[0, 1], False]

    def test_write_to_wire(self):
        assert AnimationStep.write(1, 5).to_wire() == [[1, 5], True]

    def test_from_wire_restores_step(self):
        assert AnimationStep.from_wire([[1, 5], True]) == AnimationStep.write(1, 5)

    def test_str_is_readable(self):
        assert str(AnimationStep.write(2, 7)) == "write [2] <- 7"
        assert str(AnimationStep.compare(0, 1)) == "compare 0, 1"


class TestImmutability:
    def test_steps_are_frozen(self):
        step = AnimationStep.compare(0, 1)
        with pytest.raises(ValidationError):
            step.is_write = True

    def test_equal_steps_compare_equal(self):
        assert AnimationStep.compare(0, 1) == AnimationStep.compare(0, 1)
        assert AnimationStep.compare(0, 1) != AnimationStep.compare(1, 0)
