"""stepsort - step-wise sorting engine with an optional pygame viewer."""

from .catalog import ALGORITHMS, AlgorithmDescriptor, describe, recommend
from .engine import RunResult, SortSession
from .errors import (BusyError, InvalidInputError, SortCancelled,
                     StepSortError, UnknownAlgorithmError)
from .model import RunState, Sequence, StepEvent, StepMarker
from .scaler import build_sequence, parse_values, random_values, scale

__version__ = "1.0.0"

__all__ = [
    "ALGORITHMS", "AlgorithmDescriptor", "describe", "recommend",
    "RunResult", "SortSession",
    "BusyError", "InvalidInputError", "SortCancelled", "StepSortError",
    "UnknownAlgorithmError",
    "RunState", "Sequence", "StepEvent", "StepMarker",
    "build_sequence", "parse_values", "random_values", "scale",
]
