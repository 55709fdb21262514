"""
Core domain models for the accumulator.
Contains data structures for run configuration and fold steps.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RunConfig:
    """Configuration for one accumulator run"""

    data_file: str
    operation_symbol: str
    logging_enabled: bool = False


@dataclass(frozen=True)
class AccumulationStep:
    """One application of the operation during a fold"""

    line: int
    value: float
    result: float
