"""
Logging Configuration
Sets up the loggers of the polytope4d and cross_sections packages.
"""
import logging
import os
import sys
from typing import List, Optional, Union

from .config import LOG_LEVEL_ENV, LOG_NAMESPACES


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        return resolved
    return level


def setup_logging(level: Optional[Union[int, str]] = None,
                  log_file: Optional[str] = None) -> None:
    """
    Configures the package loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG or "debug"). When omitted the
            level is read from the POLYTOPE4D_LOG_LEVEL environment variable,
            falling back to INFO.
        log_file: Optional path to save logs to a file.
    """
    level = _resolve_level(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for namespace in LOG_NAMESPACES:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)

        # Check if handlers already exist to avoid duplicate logs on a second call
        if logger.handlers:
            logger.handlers.clear()

        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger(LOG_NAMESPACES[0]).info("Logging initialized.")
