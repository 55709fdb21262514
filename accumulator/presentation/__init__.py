"""
Presentation package for the accumulator.
"""
