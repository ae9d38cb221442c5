"""Named constants shared across the recorder."""

from __future__ import annotations

ALGO_BUBBLE = "bubble"
ALGO_INSERTION = "insertion"
ALGO_SELECTION = "selection"
ALGO_MERGE = "merge"
ALGO_QUICK = "quick"
ALGO_HEAP = "heap"
ALGO_RADIX = "radix"

# Display order of the algorithm picker.
ALGORITHM_ORDER: tuple[str, ...] = (
    ALGO_BUBBLE,
    ALGO_QUICK,
    ALGO_MERGE,
    ALGO_INSERTION,
    ALGO_SELECTION,
    ALGO_HEAP,
    ALGO_RADIX,
)

# A comparison step highlights at most three bars (insertion sort's shift).
MAX_COMPARISON_INDICES = 3

RADIX_BASE = 10

# Replay slider bounds; the value is a per-step delay in milliseconds.
MIN_ANIMATION_SPEED = 0.5
MAX_ANIMATION_SPEED = 300.0
DEFAULT_ANIMATION_SPEED = 10.0

# Bounds for generated arrays.
MIN_VALUE = 10
MAX_VALUE = 500
DEFAULT_ARRAY_SIZE = 30
