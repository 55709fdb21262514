"""
Tests for number rendering on output lines.
"""

import io

import numpy as np
import pytest

from accumulator.domain.formatting import format_number
from accumulator.presentation.console.console_reporter import ConsoleReporter


@pytest.mark.parametrize(
    "value, expected",
    [
        (5.0, "5.0"),
        (17, "17.0"),
        (0.1, "0.1"),
        (-2.5, "-2.5"),
        (10000000.0, "10000000.0"),
        (0.0001, "0.0001"),
        (1e16, "1e+16"),
        (1.5e-7, "1.5e-07"),
        (float("inf"), "inf"),
    ],
)
def test_shortest_round_trip_repr(value, expected):
    assert format_number(value) == expected


def test_numpy_scalars_render_as_plain_floats():
    assert format_number(np.float64(15.0)) == "15.0"


def test_total_line_uses_exponent_form_for_large_values():
    stream = io.StringIO()
    ConsoleReporter(stream).report_total(1e16)
    assert stream.getvalue().splitlines() == ["-------", "Total = 1e+16"]
