"Randomized and exhaustive self tests for the codec"

from ._core import (
    DEFAULT_FLIP_PROBABILITY,
    DEFAULT_RUNS,
    run_exhaustive,
    run_random,
    run_trial,
)
from ._report import DecodingFailure, Report, Trial

__all__ = [
    "DEFAULT_FLIP_PROBABILITY",
    "DEFAULT_RUNS",
    "DecodingFailure",
    "Report",
    "Trial",
    "run_exhaustive",
    "run_random",
    "run_trial",
]
