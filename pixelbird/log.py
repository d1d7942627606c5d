"""Console logging for the game."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "pixelbird"

LEVEL_COLORS = {
    logging.DEBUG: "\033[90m",
    logging.INFO: "\033[36m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}
RESET = "\033[0m"


class HumanFormatter(logging.Formatter):
    """``HH:MM:SS [L] module: message``, tinted by level unless ``color`` is off."""

    def __init__(self, color: bool = True):
        super().__init__(
            "%(asctime)s [%(level_letter)s] %(short_name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        record.level_letter = record.levelname[:1]
        record.short_name = record.name.removeprefix(f"{LOGGER_NAME}.")
        line = super().format(record)
        if not self.color:
            return line
        return f"{LEVEL_COLORS.get(record.levelno, '')}{line}{RESET}"


def setup_logging(level: str = "info", stream: Optional[TextIO] = None) -> logging.Logger:
    """Send the game's records to one console handler, replacing earlier ones."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(HumanFormatter())
    logger.addHandler(handler)

    # Keep records out of the notebook's root handler
    logger.propagate = False
    return logger
