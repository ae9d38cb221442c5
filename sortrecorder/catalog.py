"""Static per-algorithm display data: titles, complexities, pseudocode listings.

The strategies record integer line indices only; this table is what a replay
consumer uses to turn those indices into highlighted text.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from . import constants
from .errors import UnknownAlgorithmError


@dataclass(frozen=True)
class AlgorithmInfo:
    key: str
    label: str
    title: str
    description: str
    worst_case: str
    average_case: str
    best_case: str
    pseudocode: tuple[str, ...]

    @property
    def line_count(self) -> int:
        return len(self.pseudocode)


_ENTRIES: tuple[AlgorithmInfo, ...] = (
    AlgorithmInfo(
        key=constants.ALGO_BUBBLE,
        label="Bubble",
        title="Bubble Sort",
        description=(
            "A simple comparison-based sorting algorithm. Bubble sort repeatedly "
            "compares and swaps adjacent elements if they are in the wrong order, "
            "moving larger elements towards the end with each pass through the list."
        ),
        worst_case="O(n²)",
        average_case="O(n²)",
        best_case="O(n)",
        pseudocode=(
            "for i from 0 to n-1",
            "  for j from 0 to n-i-1",
            "    if array[j] > array[j+1]",
            "      swap(array[j], array[j+1])",
        ),
    ),
    AlgorithmInfo(
        key=constants.ALGO_QUICK,
        label="Quick",
        title="Quick Sort",
        description=(
            "Quick sort selects a pivot element and partitions the other elements "
            "into two sub-arrays according to whether they are less than or greater "
            "than the pivot. The sub-arrays are then sorted recursively."
        ),
        worst_case="O(n²)",
        average_case="O(n log n)",
        best_case="O(n log n)",
        pseudocode=(
            "if low < high",
            "quickSort(arr, low, pivot - 1)",
            "quickSort(arr, pivot + 1, high)",
            "partition(arr, low, high)",
            "find i where array[i] > pivot",
            "find j where array[j] < pivot",
            "swap array[i] and array[j]",
            "swap pivot with array[j]",
        ),
    ),
    AlgorithmInfo(
        key=constants.ALGO_MERGE,
        label="Merge",
        title="Merge Sort",
        description=(
            "Merge sort treats the list as n sorted runs of one element and "
            "repeatedly merges neighbouring runs, doubling the run length each "
            "pass, until a single sorted run remains."
        ),
        worst_case="O(n log n)",
        average_case="O(n log n)",
        best_case="O(n log n)",
        pseudocode=(
            "for k = 1 to n by powers of 2",
            "  for i = 0 to n by 2k",
            "    merge(arr, i, i+k, min(i+2k, n))",
            "merge(arr, left, right)",
            "compare elements in left and right arrays",
            "add remaining elements from left array",
            "add remaining elements from right array",
        ),
    ),
    AlgorithmInfo(
        key=constants.ALGO_INSERTION,
        label="Insertion",
        title="Insertion Sort",
        description=(
            "Insertion sort builds the final sorted array one element at a time, "
            "taking the next unsorted element and inserting it into its position "
            "among the previously sorted elements."
        ),
        worst_case="O(n²)",
        average_case="O(n²)",
        best_case="O(n)",
        pseudocode=(
            "function insertionSort(arr):",
            "  for i = 1 to n:",
            "    key = arr[i]",
            "    while j >= 0 and arr[j] > key:",
            "      arr[j+1] = arr[j]",
            "    arr[j+1] = key",
        ),
    ),
    AlgorithmInfo(
        key=constants.ALGO_SELECTION,
        label="Selection",
        title="Selection Sort",
        description=(
            "Selection sort repeatedly finds the minimum element of the unsorted "
            "portion and swaps it with the element at the current position, "
            "moving the sorted boundary one element forward each time."
        ),
        worst_case="O(n²)",
        average_case="O(n²)",
        best_case="O(n²)",
        pseudocode=(
            "function selectionSort(arr):",
            "  for i = 0 to n-1:",
            "    minIndex = i",
            "    for j = i+1 to n:",
            "      if arr[j] < arr[minIndex]",
            "    swap(arr[i], arr[minIndex])",
        ),
    ),
    AlgorithmInfo(
        key=constants.ALGO_HEAP,
        label="Heap",
        title="Heap Sort",
        description=(
            "Heap sort arranges the array into a max-heap, then repeatedly swaps "
            "the root with the last element of the heap and sifts the new root "
            "down, shrinking the heap by one each time."
        ),
        worst_case="O(n log n)",
        average_case="O(n log n)",
        best_case="O(n log n)",
        pseudocode=(
            "function heapSort(arr):",
            "  buildMaxHeap(arr)",
            "  for i = n-1 to 1:",
            "    swap(arr[0], arr[i]); heapify(arr, i, 0)",
            "heapify(arr, n, i): if arr[left] > arr[largest]",
            "  if arr[right] > arr[largest]",
            "  if largest != i: swap, heapify(arr, n, largest)",
        ),
    ),
    AlgorithmInfo(
        key=constants.ALGO_RADIX,
        label="Radix",
        title="Radix Sort",
        description=(
            "Radix sort is a non-comparative integer sort that orders numbers "
            "digit by digit, from the least significant digit to the most "
            "significant, with a stable counting sort per digit."
        ),
        worst_case="O(nk)",
        average_case="O(nk)",
        best_case="O(nk)",
        pseudocode=(
            "for exp = 1 while max / exp > 0:",
            "  count occurrences of digit (v / exp) % 10",
            "  accumulate counts",
            "  place elements into output from right to left",
            "  copy output back to arr",
        ),
    ),
)

ALGORITHM_CATALOG: Mapping[str, AlgorithmInfo] = MappingProxyType(
    {info.key: info for info in _ENTRIES}
)

ALGORITHM_OPTIONS: tuple[tuple[str, str], ...] = tuple(
    (ALGORITHM_CATALOG[key].label, key) for key in constants.ALGORITHM_ORDER
)


def get_algorithm_info(name: str) -> AlgorithmInfo:
    """Look up display data for *name*.

    Raises ``UnknownAlgorithmError`` if *name* is not in the catalog.
    """
    info = ALGORITHM_CATALOG.get(name)
    if info is None:
        raise UnknownAlgorithmError(name)
    return info
