"""
Tests for the operation enum and symbol selection.
"""

import math

import pytest

from accumulator.domain.errors import UnsupportedOperationError
from accumulator.domain.operations import Operation, select_operation


class TestSelectOperation:
    @pytest.mark.parametrize(
        "symbol, expected",
        [
            ("+", Operation.ADDITION),
            ("-", Operation.SUBTRACTION),
            ("*", Operation.MULTIPLICATION),
        ],
    )
    def test_known_symbols(self, symbol, expected):
        assert select_operation(symbol) is expected

    @pytest.mark.parametrize("symbol", ["/", "x", "", " +", "+ ", "++", "add", "%"])
    def test_unknown_symbols_raise(self, symbol):
        with pytest.raises(UnsupportedOperationError) as exc_info:
            select_operation(symbol)
        assert exc_info.value.symbol == symbol
        assert str(exc_info.value) == f"Invalid operation: {symbol}"

    def test_unsupported_operation_is_value_error(self):
        with pytest.raises(ValueError):
            select_operation("/")


class TestOperation:
    def test_execute(self):
        assert Operation.ADDITION.execute(10.0, 5.0) == 15.0
        assert Operation.SUBTRACTION.execute(10.0, 5.0) == 5.0
        assert Operation.MULTIPLICATION.execute(10.0, 5.0) == 50.0

    def test_execute_returns_builtin_float(self):
        assert type(Operation.MULTIPLICATION.execute(2, 3)) is float

    def test_overflow_gives_infinity(self):
        assert math.isinf(Operation.MULTIPLICATION.execute(1e308, 10.0))

    def test_display_names(self):
        assert Operation.ADDITION.display_name == "addition"
        assert Operation.SUBTRACTION.display_name == "subtraction"
        assert Operation.MULTIPLICATION.display_name == "multiplication"

    def test_display_prefix_is_suppressed_for_addition(self):
        assert Operation.ADDITION.display_prefix == ""
        assert Operation.SUBTRACTION.display_prefix == "-"
        assert Operation.MULTIPLICATION.display_prefix == "*"

    def test_symbol(self):
        assert [op.symbol for op in Operation] == ["+", "-", "*"]
