"""Exception types raised by the recorder."""

from __future__ import annotations


class SortRecorderError(Exception):
    """Base class for recorder errors."""


class UnknownAlgorithmError(SortRecorderError, ValueError):
    """Raised when an algorithm selector names no registered strategy."""

    def __init__(self, name: str):
        super().__init__(f"Unknown sorting algorithm: {name!r}")
        self.name = name


class UnsupportedInputError(SortRecorderError, ValueError):
    """Raised when a strategy is handed values outside its input domain."""
