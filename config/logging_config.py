"""
Centralized logging configuration.

All loggers hang under one root ('localization'), so handlers are attached
once and every module logger inherits them:

    from config.logging_config import get_logger
    logger = get_logger(__name__)   # -> 'localization.orchestrator', ...
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)

ROOT_LOGGER_NAME = 'localization'


def setup_logger(
    level: Union[str, int, None] = None,
    log_file: Optional[str] = LOG_FILE
) -> logging.Logger:
    """
    Attach console and rotating-file handlers to the root logger.

    Safe to call again: existing handlers are replaced, which is how the
    CLI raises verbosity after import time.

    Args:
        level: Console level name or number (default LOG_LEVEL)
        log_file: Rotating log file, DEBUG level; None disables it

    Returns:
        The configured root logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    console_level = level if isinstance(level, int) else getattr(logging, LOG_LEVEL)

    formatter = logging.Formatter(LOG_FORMAT)
    root.setLevel(logging.DEBUG)
    root.propagate = False

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Module logger under the root; configures the root on first use."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        setup_logger()

    if not name or name == ROOT_LOGGER_NAME:
        return root
    if name.startswith(ROOT_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# Usage: from config.logging_config import logger
logger = get_logger()
