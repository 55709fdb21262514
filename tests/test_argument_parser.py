"""
Tests for command line parsing.
"""

import pytest

from accumulator.domain.errors import MissingArgumentsError
from accumulator.domain.models import RunConfig
from accumulator.infrastructure.argument_parser import USAGE, ArgumentParser


@pytest.fixture
def parser():
    return ArgumentParser()


@pytest.mark.parametrize("argv", [[], ["numbers.txt"]])
def test_missing_arguments(parser, argv):
    with pytest.raises(MissingArgumentsError) as exc_info:
        parser.parse_arguments(argv)
    assert exc_info.value.usage == USAGE


def test_required_arguments(parser):
    assert parser.parse_arguments(["numbers.txt", "+"]) == RunConfig(
        data_file="numbers.txt", operation_symbol="+", logging_enabled=False
    )


@pytest.mark.parametrize("symbol", ["-", "*", "/", "-log"])
def test_operation_symbol_is_taken_verbatim(parser, symbol):
    assert parser.parse_arguments(["numbers.txt", symbol]).operation_symbol == symbol


@pytest.mark.parametrize("flag", ["-log", "-LOG", "-Log"])
def test_log_flag_ignores_case(parser, flag):
    assert parser.parse_arguments(["numbers.txt", "-", flag]).logging_enabled is True


@pytest.mark.parametrize("extra", [["log"], ["--log"], ["-verbose"], ["x", "-log"]])
def test_other_third_tokens_are_ignored(parser, extra):
    config = parser.parse_arguments(["numbers.txt", "*", *extra])
    assert config.logging_enabled is False


def test_file_name_starting_with_dash(parser):
    assert parser.parse_arguments(["-numbers.txt", "+"]).data_file == "-numbers.txt"
