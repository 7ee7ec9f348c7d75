"""Logging setup shared by the app, uvicorn and the upstream HTTP client."""

import logging
from typing import Dict, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# httpx logs one INFO line per request; the clients log their own calls
QUIET_UNLESS_DEBUG = ("httpx", "httpcore")
SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "fastapi")


def _install_handler(logger: logging.Logger, formatter: logging.Formatter, level: int) -> None:
    """Replace whatever handlers a logger has with one console handler."""
    for existing in logger.handlers[:]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)


def logger_levels(level: int) -> Dict[str, int]:
    """Level for each named logger the service configures besides the root."""
    levels = {name: level for name in SERVER_LOGGERS}
    quiet = level if level <= logging.DEBUG else logging.WARNING
    levels.update({name: quiet for name in QUIET_UNLESS_DEBUG})
    return levels


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Send all service, server and HTTP client logs to the console in one format.

    Args:
        level: Level for the root and server loggers, as a number or a name
            such as "DEBUG"
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    _install_handler(logging.getLogger(), formatter, level)

    for name, named_level in logger_levels(level).items():
        logger = logging.getLogger(name)
        _install_handler(logger, formatter, named_level)
        # Don't propagate to avoid duplicate messages
        logger.propagate = False
