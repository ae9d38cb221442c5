"""Recorded run data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .step_types import AnimationStep


@dataclass(frozen=True)
class RecordedRun:
    """Complete log of one sorting run.

    ``steps`` and ``pseudocode_trace`` are independent sequences: a
    pseudocode index is appended whenever control passes a listed line,
    whether or not a step is recorded with it.
    """

    algorithm: str
    steps: tuple[AnimationStep, ...] = field(default_factory=tuple)
    pseudocode_trace: tuple[int, ...] = field(default_factory=tuple)

    @property
    def write_count(self) -> int:
        return sum(1 for s in self.steps if s.is_write)

    @property
    def comparison_count(self) -> int:
        return sum(1 for s in self.steps if not s.is_write)

    def to_dict(self) -> dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "steps": [s.to_wire() for s in self.steps],
            "pseudocode_trace": list(self.pseudocode_trace),
        }


Sink = Callable[[RecordedRun], None]
