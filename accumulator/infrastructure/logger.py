"""
Diagnostic logging for the accumulator.
"""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO


class TimestampFormatter(logging.Formatter):
    """Formats records as ``[HHMMSS:microseconds][log] message``"""

    def __init__(self):
        super().__init__("[%(asctime)s][log] %(message)s")

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        return datetime.fromtimestamp(record.created).strftime("%H%M%S:%f")


class Logger:
    """Optional diagnostic channel, enabled once per run from the command line"""

    def __init__(self, enabled: bool = False, stream: Optional[TextIO] = None):
        """Initialize logger writing to stdout (or the given stream) when enabled"""
        self.enabled = enabled
        # Unregistered logger: each run owns its handlers and level
        self.logger = logging.Logger("accumulator", logging.INFO if enabled else logging.CRITICAL + 1)
        self.logger.propagate = False

        if enabled:
            handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
            handler.setFormatter(TimestampFormatter())
            self.logger.addHandler(handler)

    def log(self, message: str) -> None:
        """Log a diagnostic message; no-op when logging is disabled"""
        if not self.enabled:
            return
        self.logger.info(message)

    def log_error(self, error: Exception, context: str) -> None:
        """Log an error with context"""
        if not self.enabled:
            return
        self.logger.error(f"error in {context}: {error}")
