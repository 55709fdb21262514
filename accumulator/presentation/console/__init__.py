"""
Console output package for the accumulator.
"""

from .console_reporter import ConsoleReporter

__all__ = ["ConsoleReporter"]
