"""Core logger functionality for the script generator."""

import logging
import sys


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def get_logger(name: str, level: str | int | None = None) -> logging.Logger:
    """
    Get a named logger.

    Under Django the LOGGING dict owns handlers, so this only hands back the
    logger (optionally pinning its level). Outside Django (scripts, bare pytest
    runs) a console handler is attached once so messages are not lost.
    """
    logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(_resolve_level(level))

    if not logging.getLogger().handlers and not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter(fmt=DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )
        logger.addHandler(console_handler)

    return logger
