"""Animation step model — one visualized comparison or write."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, model_validator

from .constants import MAX_COMPARISON_INDICES

Number = Union[int, float]


class AnimationStep(BaseModel):
    """A single recorded event of a sorting run.

    Comparison steps carry 1-3 array positions in ``payload`` and
    ``is_write=False``.  Write steps carry ``(index, value)`` and
    ``is_write=True``: position ``index`` is being set to ``value``.
    """

    model_config = ConfigDict(frozen=True)

    payload: tuple[Number, ...]
    is_write: bool = False

    @model_validator(mode="after")
    def _check_shape(self) -> AnimationStep:
        if self.is_write:
            if len(self.payload) != 2:
                raise ValueError(
                    f"write step needs (index, value), got {self.payload!r}"
                )
            index = self.payload[0]
            if not isinstance(index, int) or index < 0:
                raise ValueError(f"write index must be a non-negative int: {index!r}")
            return self
        if not 1 <= len(self.payload) <= MAX_COMPARISON_INDICES:
            raise ValueError(
                f"comparison step needs 1-{MAX_COMPARISON_INDICES} indices, "
                f"got {len(self.payload)}"
            )
        if any(not isinstance(i, int) or i < 0 for i in self.payload):
            raise ValueError(
                f"comparison indices must be non-negative ints: {self.payload!r}"
            )
        return self

    @classmethod
    def compare(cls, *indices: int) -> AnimationStep:
        return cls(payload=indices, is_write=False)

    @classmethod
    def write(cls, index: int, value: Number) -> AnimationStep:
        return cls(payload=(index, value), is_write=True)

    @property
    def indices(self) -> tuple[int, ...]:
        """Array positions touched by this step."""
        if self.is_write:
            return (self.payload[0],)
        return tuple(self.payload)

    @property
    def index(self) -> int:
        if not self.is_write:
            raise AttributeError("comparison steps have no single write index")
        return self.payload[0]

    @property
    def value(self) -> Number:
        if not self.is_write:
            raise AttributeError("comparison steps carry no value")
        return self.payload[1]

    def to_wire(self) -> list[Any]:
        """Return the ``[[...payload], is_write]`` list shape."""
        return [list(self.payload), self.is_write]

    @classmethod
    def from_wire(cls, obj: Any) -> AnimationStep:
        payload, is_write = obj
        return cls(payload=tuple(payload), is_write=bool(is_write))

    def __str__(self) -> str:
        if self.is_write:
            return f"write [{self.payload[0]}] <- {self.payload[1]}"
        return "compare " + ", ".join(str(i) for i in self.payload)
