#!/usr/bin/env python3
"""
Accumulator - command line script.

Usage: accumulate.py <filename> <+|-|*> [-log]

All processing is delegated to the accumulator package.
"""

import sys
from pathlib import Path

# Add the repository root to path so the script runs from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from accumulator.main import main


if __name__ == "__main__":
    sys.exit(main())
