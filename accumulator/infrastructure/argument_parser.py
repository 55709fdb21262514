"""
Command line argument parsing for the accumulator.
"""

import argparse
import sys
from typing import List, Optional

from accumulator.domain.errors import MissingArgumentsError
from accumulator.domain.models import RunConfig

PROG = "accumulate"
USAGE = f"Usage: {PROG} <filename> <+|-|*> [-log]"
LOG_FLAG = "-log"


class ArgumentParser:
    """Command line argument parsing and validation"""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create and configure the argument parser"""
        parser = argparse.ArgumentParser(
            prog=PROG,
            usage="%(prog)s <filename> <+|-|*> [-log]",
            description="Fold an arithmetic operation over the numbers in a file",
            add_help=False,
        )

        # Required arguments
        parser.add_argument(
            "filename",
            type=str,
            help="Path to a text file holding one number per line",
        )
        parser.add_argument(
            "operation",
            type=str,
            help="Operation to apply: '+', '-' or '*'",
        )

        # Optional third token, matched against -log ignoring case
        parser.add_argument(
            "extra",
            nargs="*",
            help="Pass -log to print timestamped diagnostic lines",
        )

        return parser

    def parse_arguments(self, argv: Optional[List[str]] = None) -> RunConfig:
        """
        Parse command line arguments and return RunConfig.

        Raises:
            MissingArgumentsError: If the file name or operation is missing
        """
        argv = list(sys.argv[1:] if argv is None else argv)

        if len(argv) < 2:
            raise MissingArgumentsError(USAGE)

        # Every token is positional, including "-" and "-log"
        args = self.parser.parse_args(["--", *argv])

        return RunConfig(
            data_file=args.filename,
            operation_symbol=args.operation,
            logging_enabled=self._is_log_flag(args.extra),
        )

    def _is_log_flag(self, extra: List[str]) -> bool:
        """Check whether the third token asks for logging"""
        return bool(extra) and extra[0].lower() == LOG_FLAG
