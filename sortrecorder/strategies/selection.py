"""Selection sort."""

from __future__ import annotations

from ._base import SortStrategy, StepRecorder
from .. import constants


class SelectionSort(SortStrategy):
    NAME = constants.ALGO_SELECTION
    LINE_COUNT = 6

    LINE_MIN_INDEX = 1
    LINE_COMPARE = 2
    LINE_SWAP = 3

    def _sort(self, array, rec: StepRecorder) -> None:
        n = len(array)
        for i in range(n - 1):
            rec.line(self.LINE_MIN_INDEX)
            min_index = i
            for j in range(i + 1, n):
                rec.line(self.LINE_COMPARE)
                rec.compare(j, i)
                if array[j] < array[min_index]:
                    min_index = j
            # Recorded even when min_index == i; both writes then repaint the same value.
            rec.line(self.LINE_SWAP)
            rec.write(i, array[min_index])
            rec.write(min_index, array[i])
            array[i], array[min_index] = array[min_index], array[i]
