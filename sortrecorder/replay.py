"""Consumer-side helpers for replaying a recorded run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from . import constants
from .catalog import get_algorithm_info
from .run_types import RecordedRun
from .step_types import AnimationStep, Number


@dataclass(frozen=True)
class ReplayConfig:
    """Groups replay pacing configuration."""

    speed: float = constants.DEFAULT_ANIMATION_SPEED

    def __post_init__(self):
        clamped = min(
            max(self.speed, constants.MIN_ANIMATION_SPEED),
            constants.MAX_ANIMATION_SPEED,
        )
        object.__setattr__(self, "speed", clamped)

    @property
    def step_delay_seconds(self) -> float:
        return self.speed / 1000


@dataclass(frozen=True)
class Frame:
    """Array state after applying one step."""

    step_index: int
    step: AnimationStep
    array: tuple[Number, ...]


def apply_steps(values: Sequence[Number], steps: Sequence[AnimationStep]) -> list[Number]:
    """Apply every write step, in order, to a copy of *values*."""
    array = list(values)
    for step in steps:
        if step.is_write:
            array[step.index] = step.value
    return array


def iter_frames(values: Sequence[Number], run: RecordedRun) -> Iterator[Frame]:
    array = list(values)
    for step_index, step in enumerate(run.steps):
        if step.is_write:
            array[step.index] = step.value
        yield Frame(step_index=step_index, step=step, array=tuple(array))


def highlighted_lines(run: RecordedRun) -> list[str]:
    """Map the run's pseudocode trace onto its algorithm's listing text."""
    listing = get_algorithm_info(run.algorithm).pseudocode
    return [listing[i] for i in run.pseudocode_trace]
