"""
Loading of number files for the accumulator.
"""

import re
from pathlib import Path
from typing import List, Union

import numpy as np

from accumulator.domain.errors import (
    EmptyNumberListError,
    FileUnreadableError,
    MalformedNumericLineError,
)
from accumulator.infrastructure.logger import Logger

# Plain decimal literal: optional sign, digits with an optional fraction, optional exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class NumberListLoader:
    """Responsible for loading a number file into an ordered float64 sequence"""

    def __init__(self, logger: Logger = None):
        self.logger = logger if logger is not None else Logger()

    def read_lines(self, file_path: Union[str, Path]) -> List[str]:
        """
        Read the whole file at once and split it into lines.

        Raises:
            FileUnreadableError: If the file is missing, a directory, or not text
        """
        try:
            text = Path(file_path).read_text(encoding="utf-8")
        except FileNotFoundError:
            raise FileUnreadableError(str(file_path), "file not found") from None
        except IsADirectoryError:
            raise FileUnreadableError(str(file_path), "is a directory") from None
        except UnicodeDecodeError as e:
            raise FileUnreadableError(str(file_path), f"not a text file ({e.reason})") from e
        except OSError as e:
            raise FileUnreadableError(str(file_path), e.strerror or str(e)) from e
        return text.splitlines()

    def parse_value(self, text: str, line_number: int) -> float:
        """
        Parse one line as a decimal floating-point number.

        Args:
            text: Raw line content
            line_number: 1-based line number in the file, used in errors

        Returns:
            float: Parsed value

        Raises:
            MalformedNumericLineError: If the line is not a decimal literal
        """
        candidate = text.strip()
        if not DECIMAL_PATTERN.fullmatch(candidate):
            raise MalformedNumericLineError(line_number, text)
        return float(candidate)

    def load(self, file_path: Union[str, Path]) -> np.ndarray:
        """
        Load a number file, one value per non-empty line.

        Args:
            file_path: Path to the number file

        Returns:
            numpy.ndarray: One-dimensional float64 array in file order

        Raises:
            FileUnreadableError: If the file cannot be read
            MalformedNumericLineError: If any line is not a number
            EmptyNumberListError: If no line holds a number
        """
        lines = self.read_lines(file_path)

        values = [
            self.parse_value(line, line_number)
            for line_number, line in enumerate(lines, start=1)
            if line.strip()
        ]
        if not values:
            raise EmptyNumberListError(str(file_path))

        numbers = np.array(values, dtype=np.float64)
        self.logger.log(f"loaded {numbers.size} values from {file_path}")
        return numbers
