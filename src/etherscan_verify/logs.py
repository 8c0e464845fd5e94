"""Logging setup with color-tagged levels."""

import logging
import sys
from typing import Optional, TextIO

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

PACKAGE_LOGGER = "etherscan_verify"

_COLORS = {
    logging.DEBUG: "\033[2m",
    logging.INFO: "\033[33m",  # yellow
    SUCCESS: "\033[32m",  # green
    logging.WARNING: "\033[35m",
    logging.ERROR: "\033[31m",  # red
    logging.CRITICAL: "\033[1;31m",
}
_RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Wrap each record in the ANSI color of its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = _COLORS.get(record.levelno)
        if color is None:
            return message
        return f"{color}{message}{_RESET}"


def setup_logging(
    level: int = logging.INFO, color: bool = True, stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the package logger for command-line use.

    Args:
        level: Minimum level to emit
        color: Color lines by level (info yellow, success green, error red)
        stream: Output stream (defaults to stdout)

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Replace handlers from a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler(stream or sys.stdout)
    console.setLevel(level)
    formatter_class = ColorFormatter if color else logging.Formatter
    console.setFormatter(formatter_class("%(message)s"))
    logger.addHandler(console)

    return logger
