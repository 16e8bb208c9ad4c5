"""
Logging Configuration
Sets up the 'gallifreyan' logger for applications that embed the engine.
The library itself never configures logging on import.
"""
import logging
import os
import sys
from typing import Optional, TextIO, Union

LOGGER_NAME = "gallifreyan"
LEVEL_ENV_VAR = "GALLIFREYAN_LOG_LEVEL"


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, logging.INFO)
    if isinstance(level, str):
        if level.strip().isdigit():
            return int(level)
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        return resolved
    return level


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'gallifreyan' namespace.

    Args:
        level: Logging level as a number or name (e.g. logging.DEBUG, "debug").
            Defaults to $GALLIFREYAN_LOG_LEVEL, then INFO.
        log_file: Optional path to save logs to a file.
        stream: Console stream, stdout by default.

    Returns:
        The configured package logger.
    """
    resolved = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)

    # Repeated setup must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setLevel(resolved)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(resolved)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at level {logging.getLevelName(resolved)}.")
    return logger
