"""Centralized logging configuration for sysexec."""

import logging
import sys
from typing import Optional

from sysexec.env_var import get_log_level


class PrefixFormatter(logging.Formatter):
    """Formatter that tags every diagnostic line with the package name."""

    prefix = "sysexec: "

    def format(self, record: logging.LogRecord) -> str:
        formatted_message = super().format(record)
        return f"{self.prefix}{formatted_message}"


def setup_logging(level: Optional[int] = None) -> None:
    """Set up centralized logging configuration.

    Diagnostics are written to stderr so they never mix with a child's
    redirected standard output.
    """
    if level is None:
        level = get_log_level()

    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(PrefixFormatter(fmt="%(message)s", datefmt=None))

    logger.addHandler(console_handler)


# Configured by the CLI entry point; library callers keep their own setup
logger = logging.getLogger("sysexec")
