"""
Data access package for the accumulator.

This package contains the loader that turns a number file into the ordered
sequence folded by the accumulator.
"""

from .number_loader import NumberListLoader

__all__ = ["NumberListLoader"]
