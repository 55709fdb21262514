"""
Number-List Accumulator Package

Reads a list of numbers from a text file and folds one arithmetic operation
across them, printing every intermediate result and the final total.
The package is split into domain, infrastructure, presentation and
application layers.
"""

__version__ = "1.0.0"
