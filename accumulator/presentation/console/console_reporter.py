"""
Console output of computation lines and totals.
"""

import sys
from typing import Optional, TextIO

from accumulator.domain.formatting import format_number

SEPARATOR = "-------"


class ConsoleReporter:
    """Writes the user-facing result lines to standard output"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def _write(self, line: str) -> None:
        # Resolve stdout late so redirected streams are honoured
        print(line, file=self.stream if self.stream is not None else sys.stdout)

    def report_step(self, prefix: str, value: float, result: float) -> None:
        """Print one computation line: ``<prefix><value> = <result>``"""
        self._write(f"{prefix}{format_number(value)} = {format_number(result)}")

    def report_total(self, result: float) -> None:
        """Print the separator and the final total"""
        self._write(SEPARATOR)
        self._write(f"Total = {format_number(result)}")
