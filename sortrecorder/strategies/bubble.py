"""Bubble sort."""

from __future__ import annotations

from ._base import SortStrategy, StepRecorder
from .. import constants


class BubbleSort(SortStrategy):
    NAME = constants.ALGO_BUBBLE
    LINE_COUNT = 4

    LINE_FOR_I = 0
    LINE_FOR_J = 1
    LINE_IF = 2
    LINE_SWAP = 3

    def _sort(self, array, rec: StepRecorder) -> None:
        n = len(array)
        for i in range(n - 1):
            rec.line(self.LINE_FOR_I)
            for j in range(n - i - 1):
                rec.line(self.LINE_FOR_J)
                rec.compare(j, j + 1)
                if array[j] > array[j + 1]:
                    rec.line(self.LINE_IF)
                    rec.write(j, array[j + 1])
                    rec.write(j + 1, array[j])
                    array[j], array[j + 1] = array[j + 1], array[j]
                    rec.line(self.LINE_SWAP)
