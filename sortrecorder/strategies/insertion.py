"""Insertion sort."""

from __future__ import annotations

from ._base import SortStrategy, StepRecorder
from .. import constants


class InsertionSort(SortStrategy):
    NAME = constants.ALGO_INSERTION
    LINE_COUNT = 6

    LINE_KEY = 1
    LINE_SHIFT = 2
    LINE_PLACE = 3

    def _sort(self, array, rec: StepRecorder) -> None:
        for i in range(1, len(array)):
            rec.line(self.LINE_KEY)
            rec.compare(i)
            key = array[i]
            j = i - 1
            while j >= 0 and array[j] > key:
                rec.line(self.LINE_SHIFT)
                rec.compare(j, j + 1, i)
                array[j + 1] = array[j]
                rec.write(j + 1, array[j])
                j -= 1
            rec.line(self.LINE_PLACE)
            array[j + 1] = key
            rec.write(j + 1, key)
