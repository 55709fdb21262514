"""
This package contains the domain layer for the accumulator.

The domain layer is responsible for the arithmetic rules of a run.
"""

from .errors import (
    AccumulatorError,
    EmptyNumberListError,
    FileUnreadableError,
    MalformedNumericLineError,
    MissingArgumentsError,
    UnsupportedOperationError,
)
from .models import AccumulationStep, RunConfig
from .operations import Operation, select_operation

__all__ = [
    "AccumulationStep",
    "AccumulatorError",
    "EmptyNumberListError",
    "FileUnreadableError",
    "MalformedNumericLineError",
    "MissingArgumentsError",
    "Operation",
    "RunConfig",
    "UnsupportedOperationError",
    "select_operation",
]
