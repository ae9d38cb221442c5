"""Bottom-up merge sort."""

from __future__ import annotations

from ._base import SortStrategy, StepRecorder
from .. import constants


class MergeSort(SortStrategy):
    """Iterative merge sort over runs of length 1, 2, 4, ...

    The last run of a pass may be shorter than ``k``, or absent; an absent
    right run copies the left run back unchanged.
    """

    NAME = constants.ALGO_MERGE
    LINE_COUNT = 7

    LINE_FOR_K = 0
    LINE_FOR_I = 1
    LINE_BOUNDS = 2
    LINE_MERGE = 3
    LINE_COMPARE = 4
    LINE_DRAIN_LEFT = 5
    LINE_DRAIN_RIGHT = 6

    def _sort(self, array, rec: StepRecorder) -> None:
        n = len(array)
        rec.line(self.LINE_FOR_K)
        k = 1
        while k < n:
            rec.line(self.LINE_FOR_I)
            for i in range(0, n, 2 * k):
                rec.line(self.LINE_BOUNDS)
                begin = i
                middle = i + k
                finish = min(i + 2 * k, n)
                self._merge(array, begin, middle, finish, rec)
            k *= 2

    def _merge(self, array, begin: int, middle: int, finish: int, rec: StepRecorder) -> None:
        rec.line(self.LINE_MERGE)
        left = array[begin:middle]
        right = array[middle:finish]

        i = j = 0
        k = begin
        while i < len(left) and j < len(right):
            rec.line(self.LINE_COMPARE)
            rec.compare(begin + i, middle + j)
            if left[i] <= right[j]:
                rec.write(k, left[i])
                array[k] = left[i]
                i += 1
            else:
                rec.write(k, right[j])
                array[k] = right[j]
                j += 1
            k += 1
        while i < len(left):
            rec.line(self.LINE_DRAIN_LEFT)
            rec.compare(begin + i)
            rec.write(k, left[i])
            array[k] = left[i]
            i += 1
            k += 1
        while j < len(right):
            rec.line(self.LINE_DRAIN_RIGHT)
            rec.compare(middle + j)
            rec.write(k, right[j])
            array[k] = right[j]
            j += 1
            k += 1
