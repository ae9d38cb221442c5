"""SortStrategy — shared recording contract for every sorting algorithm."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from ..run_types import RecordedRun, Sink
from ..step_types import AnimationStep, Number

logger = logging.getLogger(__name__)


class StepRecorder:
    """Accumulates the step log and the pseudocode trace of one run."""

    def __init__(self, line_count: int):
        self._line_count = line_count
        self.steps: list[AnimationStep] = []
        self.pseudocode_trace: list[int] = []

    def compare(self, *indices: int) -> None:
        self.steps.append(AnimationStep.compare(*indices))

    def write(self, index: int, value: Number) -> None:
        self.steps.append(AnimationStep.write(index, value))

    def line(self, index: int) -> None:
        if not 0 <= index < self._line_count:
            raise ValueError(
                f"pseudocode line {index} outside listing of {self._line_count} lines"
            )
        self.pseudocode_trace.append(index)

    def build(self, algorithm: str) -> RecordedRun:
        return RecordedRun(
            algorithm=algorithm,
            steps=tuple(self.steps),
            pseudocode_trace=tuple(self.pseudocode_trace),
        )


class SortStrategy(ABC):
    """Base class for recording sort strategies.

    Subclasses set ``NAME`` and ``LINE_COUNT`` and implement ``_sort``,
    which sorts the working array in place while feeding the recorder.
    """

    NAME: str = ""
    LINE_COUNT: int = 0

    def run(self, is_busy: bool, values: Sequence[Number], sink: Sink) -> None:
        """Record a run over *values* and hand it to *sink*.

        Does nothing while a previous playback is busy or when there is
        nothing to sort (fewer than two values).  Otherwise *sink* is called
        exactly once, synchronously, with the completed run.
        """
        if is_busy:
            logger.debug("%s: busy, skipping", self.NAME)
            return
        if len(values) <= 1:
            logger.debug("%s: %d value(s), nothing to record", self.NAME, len(values))
            return
        sink(self.record(values))

    def record(self, values: Sequence[Number]) -> RecordedRun:
        """Sort a private copy of *values* and return the recorded run."""
        self.validate(values)
        working = list(values)
        recorder = StepRecorder(self.LINE_COUNT)
        if len(working) > 1:
            self._sort(working, recorder)
        recorded = recorder.build(self.NAME)
        logger.info(
            "%s: recorded %d steps, %d pseudocode lines for n=%d",
            self.NAME,
            len(recorded.steps),
            len(recorded.pseudocode_trace),
            len(working),
        )
        return recorded

    def validate(self, values: Sequence[Number]) -> None:
        """Reject inputs outside the algorithm's domain. Accepts all by default."""

    @abstractmethod
    def _sort(self, array: list[Number], rec: StepRecorder) -> None: ...
