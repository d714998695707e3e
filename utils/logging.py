"""Logging setup for anime-schedule, built on loguru.

Two sinks, both driven by `settings.logging`:
- stderr at `console_level` (DEBUG when --debug is given)
- a rotating file in get_data_path() at `file_level`

Modules call get_logger(__name__) at import time, which installs the
default sinks; main.cli() calls configure_logging(debug=True) afterwards
to replace them.
"""

import sys
from pathlib import Path

from loguru import logger as _base_logger

from models.config import LoggingSettings, get_data_path, settings

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

_initialized = False


def log_file_path(config: LoggingSettings | None = None) -> Path:
    """Where the file sink writes."""
    config = config or settings.logging
    return get_data_path() / config.file_name


def configure_logging(debug: bool = False, config: LoggingSettings | None = None) -> None:
    """Install the console and file sinks.

    Args:
        debug: Print DEBUG messages to the console regardless of `console_level`
        config: Sink settings (defaults to settings.logging)
    """
    global _initialized

    if _initialized and not debug and config is None:
        return

    config = config or settings.logging
    log_file = log_file_path(config)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    _base_logger.remove()
    _base_logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if debug else config.console_level,
    )
    _base_logger.add(
        log_file,
        format=FILE_FORMAT,
        level=config.file_level,
        rotation=config.rotation,
        retention=config.retention,
        compression="zip",
    )

    _initialized = True


def get_logger(name: str):
    """Logger bound to `name` (typically __name__); configures sinks on first use."""
    if not _initialized:
        configure_logging()

    return _base_logger.bind(name=name)
