"""Sorting animation recorder package."""

from .dispatcher import (  # noqa: F401
    SortingAlgorithm,
    generate_animation,
    record_animation,
)
from .run_types import RecordedRun  # noqa: F401
from .step_types import AnimationStep  # noqa: F401
from .strategies import SUPPORTED_ALGORITHMS, get_strategy  # noqa: F401
from .errors import (  # noqa: F401
    SortRecorderError,
    UnknownAlgorithmError,
    UnsupportedInputError,
)
