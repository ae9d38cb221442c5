"""Recording sort strategies, one module per algorithm."""

from __future__ import annotations

import importlib

from ._base import SortStrategy, StepRecorder
from ..errors import UnknownAlgorithmError

_STRATEGY_CLASSES: dict[str, str] = {
    "bubble": "bubble.BubbleSort",
    "insertion": "insertion.InsertionSort",
    "selection": "selection.SelectionSort",
    "merge": "merge.MergeSort",
    "quick": "quick.QuickSort",
    "heap": "heap.HeapSort",
    "radix": "radix.RadixSort",
}


def get_strategy(name: str) -> SortStrategy:
    """Instantiate the strategy registered under *name*.

    Raises ``UnknownAlgorithmError`` if *name* has no registered strategy.
    """
    entry = _STRATEGY_CLASSES.get(name)
    if entry is None:
        raise UnknownAlgorithmError(name)
    module_name, class_name = entry.split(".")
    mod = importlib.import_module(f".{module_name}", package=__package__)
    cls = getattr(mod, class_name)
    return cls()


SUPPORTED_ALGORITHMS: tuple[str, ...] = tuple(_STRATEGY_CLASSES.keys())

__all__ = [
    "SortStrategy",
    "StepRecorder",
    "get_strategy",
    "SUPPORTED_ALGORITHMS",
]
