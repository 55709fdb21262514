"""
Accumulator - main entry point.

Parses the command line and hands the run to the application service.
No arithmetic happens here.
"""

import sys
from typing import List, Optional

from accumulator.application.accumulation_service import AccumulationService
from accumulator.domain.errors import AccumulatorError, MissingArgumentsError
from accumulator.infrastructure.argument_parser import ArgumentParser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point - returns the process exit status"""
    try:
        config = ArgumentParser().parse_arguments(argv)
        AccumulationService(config).process()
        return 0

    except MissingArgumentsError as e:
        print(e.usage, file=sys.stderr)
        return 1

    except AccumulatorError as e:
        print(e, file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130


def run() -> None:
    """Console script hook"""
    sys.exit(main())


if __name__ == "__main__":
    run()
