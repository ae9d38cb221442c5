"""Random input generation for recordings."""

from __future__ import annotations

import random
from typing import Optional

from . import constants


def random_int_in_interval(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Return a random integer in ``[low, high]``, both ends inclusive."""
    if low > high:
        raise ValueError(f"Empty interval: low={low} > high={high}")
    return (rng or random).randint(low, high)


def generate_random_array(
    size: int = constants.DEFAULT_ARRAY_SIZE,
    low: int = constants.MIN_VALUE,
    high: int = constants.MAX_VALUE,
    rng: Optional[random.Random] = None,
) -> list[int]:
    """Return *size* random integers drawn from ``[low, high]``.

    Pass a seeded ``random.Random`` as *rng* for reproducible arrays.
    """
    if size < 0:
        raise ValueError(f"Array size must be non-negative, got {size}")
    if low > high:
        raise ValueError(f"Empty interval: low={low} > high={high}")
    source = rng or random.Random()
    return [random_int_in_interval(low, high, source) for _ in range(size)]
