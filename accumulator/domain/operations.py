"""
Arithmetic operations supported by the accumulator.
"""

from enum import Enum

import numpy as np

from accumulator.domain.errors import UnsupportedOperationError


class Operation(Enum):
    """Closed set of binary operations, keyed by their command-line symbol"""

    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.name.lower()

    @property
    def display_prefix(self) -> str:
        """Symbol shown before each value on a computation line"""
        return "" if self is Operation.ADDITION else self.value

    def execute(self, a: float, b: float) -> float:
        """
        Apply the operation to two operands.

        Args:
            a: Left operand (the running result)
            b: Right operand (the next value)

        Returns:
            float: IEEE 754 result; overflow gives inf instead of raising
        """
        with np.errstate(all="ignore"):
            return float(_FUNCTIONS[self](np.float64(a), np.float64(b)))


_FUNCTIONS = {
    Operation.ADDITION: np.add,
    Operation.SUBTRACTION: np.subtract,
    Operation.MULTIPLICATION: np.multiply,
}


def select_operation(symbol: str) -> Operation:
    """
    Map a one-character symbol to its Operation.

    Raises:
        UnsupportedOperationError: If the symbol is not exactly +, - or *
    """
    try:
        return Operation(symbol)
    except ValueError:
        raise UnsupportedOperationError(symbol) from None
