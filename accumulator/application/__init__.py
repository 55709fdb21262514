"""
This package contains the application layer for the accumulator.

The application layer is responsible for orchestrating one accumulator run.
"""

from .accumulation_service import AccumulationService

__all__ = ["AccumulationService"]
