"""Step-by-step recordings of heap sort and radix sort."""

import pytest

from sortrecorder.errors import UnsupportedInputError
from sortrecorder.replay import apply_steps
from sortrecorder.step_types import AnimationStep
from sortrecorder.strategies import get_strategy
from sortrecorder.strategies.heap import HeapSort
from sortrecorder.strategies.radix import RadixSort

C = AnimationStep.compare
W = AnimationStep.write


def _capture(algorithm, values):
    received = []
    get_strategy(algorithm).run(False, values, received.append)
    return received


class TestHeapSort:
    def test_sorts_example(self):
        [recorded] = _capture("heap", [4, 10, 3, 5, 1])
        assert apply_steps([4, 10, 3, 5, 1], recorded.steps) == [1, 3, 4, 5, 10]

    def test_build_heap_steps(self):
        [recorded] = _capture("heap", [4, 10, 3, 5, 1])
        assert recorded.steps[:6] == (
            C(0, 1),
            W(0, 10),
            W(1, 4),
            C(1, 3),
            W(1, 5),
            W(3, 4),
        )
        build_end = recorded.pseudocode_trace.index(HeapSort.LINE_SORT_LOOP)
        assert recorded.pseudocode_trace[:build_end] == (1, 4, 5, 4, 5, 6, 4, 5, 6, 4, 5)

    def test_max_at_root_after_build(self):
        values = [4, 10, 3, 5, 1]
        [recorded] = _capture("heap", values)
        build_writes = recorded.steps[:6]
        assert apply_steps(values, build_writes) == [10, 5, 3, 4, 1]

    def test_each_extraction_swaps_root_with_tail(self):
        [recorded] = _capture("heap", [4, 10, 3, 5, 1])
        assert C(0, 4) in recorded.steps
        assert C(0, 3) in recorded.steps
        assert recorded.pseudocode_trace.count(HeapSort.LINE_SWAP_ROOT) == 4

    def test_heap_suffix_sorted_before_every_extraction(self):
        values = [9, 2, 7, 4, 6, 1, 8, 3, 5]
        [recorded] = _capture("heap", values)
        array = list(values)
        checked = set()
        for step in recorded.steps:
            if step.is_write:
                array[step.index] = step.value
            elif step.payload[0] == 0 and step.payload[-1] >= 3:
                # Heapify never compares the root with a position past 2.
                tail = step.payload[1]
                assert array[tail + 1:] == sorted(values)[tail + 1:]
                assert array[0] == max(array[: tail + 1])
                checked.add(tail)
        assert checked == set(range(3, len(values)))


class TestRadixSort:
    def test_sorts_example(self):
        values = [170, 45, 75, 90, 802, 24, 2, 66]
        [recorded] = _capture("radix", values)
        assert apply_steps(values, recorded.steps) == [2, 24, 45, 66, 75, 90, 170, 802]

    def test_one_write_per_element_per_pass(self):
        values = [170, 45, 75, 90, 802, 24, 2, 66]
        [recorded] = _capture("radix", values)
        assert recorded.comparison_count == 0
        assert recorded.write_count == 3 * len(values)
        assert recorded.pseudocode_trace == (0,) + (1, 2, 3, 4) * 3

    def test_first_pass_orders_by_units_digit_stably(self):
        values = [170, 45, 75, 90, 802, 24, 2, 66]
        [recorded] = _capture("radix", values)
        first_pass = [s.value for s in recorded.steps[: len(values)]]
        assert first_pass == [170, 90, 802, 2, 24, 45, 75, 66]

    def test_all_zero_input_records_no_passes(self):
        [recorded] = _capture("radix", [0, 0, 0])
        assert recorded.steps == ()
        assert recorded.pseudocode_trace == (RadixSort.LINE_FOR_EXP,)

    def test_integral_floats_accepted(self):
        [recorded] = _capture("radix", [3.0, 1.0, 2.0])
        assert apply_steps([3.0, 1.0, 2.0], recorded.steps) == [1.0, 2.0, 3.0]

    @pytest.mark.parametrize(
        "values",
        [[3, -1, 2], [1.5, 2], [True, False], ["3", "1"]],
        ids=["negative", "fractional", "bool", "string"],
    )
    def test_out_of_contract_input_rejected(self, values):
        received = []
        with pytest.raises(UnsupportedInputError):
            get_strategy("radix").run(False, values, received.append)
        assert received == []

    def test_rejection_is_a_value_error(self):
        with pytest.raises(ValueError):
            get_strategy("radix").record([-5, 5])

    def test_degenerate_input_skips_validation(self):
        assert _capture("radix", [-1]) == []
