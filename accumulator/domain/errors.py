"""
Error types raised by the accumulator.

Every error is fatal: it is raised where it is detected and reported once
by the entry point.
"""


class AccumulatorError(Exception):
    """Base class for all accumulator failures"""


class MissingArgumentsError(AccumulatorError):
    """Raised when the required positional arguments are absent"""

    def __init__(self, usage: str):
        super().__init__(usage)
        self.usage = usage


class FileUnreadableError(AccumulatorError, OSError):
    """Raised when the number file cannot be opened or read"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read file {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedNumericLineError(AccumulatorError, ValueError):
    """Raised when a line of the number file is not a decimal number"""

    def __init__(self, line: int, text: str):
        super().__init__(f"Malformed numeric value on line {line}: {text!r}")
        self.line = line
        self.text = text


class EmptyNumberListError(AccumulatorError, ValueError):
    """Raised when the number file holds no values at all"""

    def __init__(self, path: str):
        super().__init__(f"No numeric values found in {path}")
        self.path = path


class UnsupportedOperationError(AccumulatorError, ValueError):
    """Raised for an operation symbol other than +, - or *"""

    def __init__(self, symbol: str):
        super().__init__(f"Invalid operation: {symbol}")
        self.symbol = symbol
