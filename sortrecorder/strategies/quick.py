"""Quick sort with a first-element pivot and a two-cursor partition."""

from __future__ import annotations

from ._base import SortStrategy, StepRecorder
from .. import constants

_SORT = "sort"
_LINE = "line"


class QuickSort(SortStrategy):
    """Quick sort driven by an explicit work stack.

    The stack replays the recursive call order exactly (left range, then
    the "recurse right" line, then right range), so the recorded steps are
    those of the recursive formulation without its depth limit.
    """

    NAME = constants.ALGO_QUICK
    LINE_COUNT = 8

    LINE_IF_LOW_HIGH = 0
    LINE_RECURSE_LEFT = 1
    LINE_RECURSE_RIGHT = 2
    LINE_PARTITION = 3
    LINE_SCAN_I = 4
    LINE_SCAN_J = 5
    LINE_SWAP = 6
    LINE_SWAP_PIVOT = 7

    def _sort(self, array, rec: StepRecorder) -> None:
        work: list[tuple] = [(_SORT, 0, len(array) - 1)]
        while work:
            task = work.pop()
            if task[0] == _LINE:
                rec.line(task[1])
                continue
            _, begin, finish = task
            if begin >= finish:
                continue
            rec.line(self.LINE_IF_LOW_HIGH)
            part = self._partition(array, begin, finish, rec)
            rec.line(self.LINE_RECURSE_LEFT)
            work.append((_SORT, part + 1, finish))
            work.append((_LINE, self.LINE_RECURSE_RIGHT))
            work.append((_SORT, begin, part - 1))

    def _partition(self, array, begin: int, finish: int, rec: StepRecorder) -> int:
        rec.line(self.LINE_PARTITION)
        i = begin
        j = finish + 1
        pivot = array[begin]

        while True:
            rec.line(self.LINE_SCAN_I)
            i += 1
            while array[i] <= pivot:
                if i == finish:
                    break
                rec.compare(i)
                i += 1

            rec.line(self.LINE_SCAN_J)
            j -= 1
            while array[j] >= pivot:
                if j == begin:
                    break
                rec.compare(j)
                j -= 1

            if j <= i:
                break

            rec.line(self.LINE_SWAP)
            rec.write(i, array[j])
            rec.write(j, array[i])
            array[i], array[j] = array[j], array[i]

        rec.line(self.LINE_SWAP_PIVOT)
        rec.write(begin, array[j])
        rec.write(j, array[begin])
        array[begin], array[j] = array[j], array[begin]
        return j
