"""Heap sort."""

from __future__ import annotations

from ._base import SortStrategy, StepRecorder
from .. import constants


class HeapSort(SortStrategy):
    NAME = constants.ALGO_HEAP
    LINE_COUNT = 7

    LINE_BUILD_HEAP = 1
    LINE_SORT_LOOP = 2
    LINE_SWAP_ROOT = 3
    LINE_CHECK_LEFT = 4
    LINE_CHECK_RIGHT = 5
    LINE_SIFT = 6

    def _sort(self, array, rec: StepRecorder) -> None:
        n = len(array)
        rec.line(self.LINE_BUILD_HEAP)
        for i in range(n // 2 - 1, -1, -1):
            self._heapify(array, n, i, rec)

        rec.line(self.LINE_SORT_LOOP)
        for i in range(n - 1, 0, -1):
            rec.line(self.LINE_SWAP_ROOT)
            rec.compare(0, i)
            rec.write(0, array[i])
            rec.write(i, array[0])
            array[0], array[i] = array[i], array[0]
            self._heapify(array, i, 0, rec)

    def _heapify(self, array, size: int, i: int, rec: StepRecorder) -> None:
        """Sift ``array[i]`` down within ``array[:size]``."""
        while True:
            largest = i
            left = 2 * i + 1
            right = 2 * i + 2

            rec.line(self.LINE_CHECK_LEFT)
            if left < size and array[left] > array[largest]:
                largest = left

            rec.line(self.LINE_CHECK_RIGHT)
            if right < size and array[right] > array[largest]:
                largest = right

            if largest == i:
                return

            rec.line(self.LINE_SIFT)
            rec.compare(i, largest)
            rec.write(i, array[largest])
            rec.write(largest, array[i])
            array[i], array[largest] = array[largest], array[i]
            i = largest
