"""Dispatcher — routes an algorithm selector to its recording strategy."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence, Union

from .run_types import RecordedRun, Sink
from .step_types import Number
from .strategies import SUPPORTED_ALGORITHMS, get_strategy

logger = logging.getLogger(__name__)


class SortingAlgorithm(str, Enum):
    BUBBLE = "bubble"
    INSERTION = "insertion"
    SELECTION = "selection"
    MERGE = "merge"
    QUICK = "quick"
    HEAP = "heap"
    RADIX = "radix"


Selector = Union[SortingAlgorithm, str]


def _selector_name(selected_algorithm: Selector) -> str:
    if isinstance(selected_algorithm, SortingAlgorithm):
        return selected_algorithm.value
    return selected_algorithm


def generate_animation(
    selected_algorithm: Selector,
    is_busy: bool,
    values: Sequence[Number],
    sink: Sink,
) -> None:
    """Record *values* with the selected algorithm and deliver the run to *sink*.

    An unrecognized selector is logged and ignored.
    """
    name = _selector_name(selected_algorithm)
    if name not in SUPPORTED_ALGORITHMS:
        logger.warning("Ignoring unknown sorting algorithm %r", name)
        return
    get_strategy(name).run(is_busy, values, sink)


def record_animation(selected_algorithm: Selector, values: Sequence[Number]) -> RecordedRun:
    """Record *values* with the selected algorithm and return the run directly.

    No busy or length guard applies; fewer than two values yield an empty run.

    Raises:
        UnknownAlgorithmError: If *selected_algorithm* is not registered.
        UnsupportedInputError: If the algorithm cannot sort *values*.
    """
    return get_strategy(_selector_name(selected_algorithm)).record(values)
