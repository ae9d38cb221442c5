"""LSD radix sort, base 10."""

from __future__ import annotations

from typing import Sequence

from ._base import SortStrategy, StepRecorder
from .. import constants
from ..errors import UnsupportedInputError


def _is_non_negative_integer(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    if isinstance(value, float):
        return value.is_integer() and value >= 0
    return False


class RadixSort(SortStrategy):
    """Least-significant-digit radix sort.

    Defined for non-negative integers only; anything else is rejected
    before recording starts.
    """

    NAME = constants.ALGO_RADIX
    LINE_COUNT = 5

    LINE_FOR_EXP = 0
    LINE_COUNT_DIGITS = 1
    LINE_ACCUMULATE = 2
    LINE_BUILD_OUTPUT = 3
    LINE_COPY_BACK = 4

    def validate(self, values: Sequence) -> None:
        bad = [v for v in values if not _is_non_negative_integer(v)]
        if bad:
            raise UnsupportedInputError(
                f"radix sort needs non-negative integers, got {bad[:5]!r}"
            )

    def _sort(self, array, rec: StepRecorder) -> None:
        max_element = max(array)
        rec.line(self.LINE_FOR_EXP)
        exp = 1
        while max_element // exp > 0:
            self._counting_sort(array, exp, rec)
            exp *= constants.RADIX_BASE

    def _counting_sort(self, array, exp: int, rec: StepRecorder) -> None:
        base = constants.RADIX_BASE
        n = len(array)
        output = [0] * n
        count = [0] * base

        rec.line(self.LINE_COUNT_DIGITS)
        for value in array:
            count[int(value // exp) % base] += 1

        rec.line(self.LINE_ACCUMULATE)
        for d in range(1, base):
            count[d] += count[d - 1]

        rec.line(self.LINE_BUILD_OUTPUT)
        for i in range(n - 1, -1, -1):
            digit = int(array[i] // exp) % base
            output[count[digit] - 1] = array[i]
            count[digit] -= 1

        rec.line(self.LINE_COPY_BACK)
        for i in range(n):
            rec.write(i, output[i])
            array[i] = output[i]
