"""
Business logic services package for the accumulator.
"""

from .accumulator import Accumulator

__all__ = ["Accumulator"]
