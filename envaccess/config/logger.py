"""Loguru configuration for envaccess entry points."""
from __future__ import annotations

import sys

from loguru import logger

from ..utils.env import get_env_var

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure loguru sinks and enable envaccess log output.

    Environment variables take precedence over the arguments, which act as
    fallbacks (e.g. values read from a local .env file).

    Args:
        level: Fallback console log level (default INFO)
        log_file: Fallback path of a rotating debug log file

    Environment Variables:
        ENVACCESS_LOG_LEVEL: Console log level (optional)
        ENVACCESS_LOG_FILE: Path of a rotating debug log file (optional)
    """
    console_level = (get_env_var("ENVACCESS_LOG_LEVEL") or level or "INFO").upper()
    log_file = get_env_var("ENVACCESS_LOG_FILE", default=log_file)

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=console_level,
        colorize=True,
    )

    if log_file:
        logger.add(
            log_file,
            rotation="00:00",  # Rotate at midnight
            retention="30 days",
            level="DEBUG",
            format=FILE_FORMAT,
        )

    logger.enable("envaccess")
    logger.debug(f"Logging configured at level {console_level}")
