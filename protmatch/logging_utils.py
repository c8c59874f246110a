"""
protmatch - Logging Setup

Library modules only call logging.getLogger(__name__); the command line
entry point configures handlers once through init_logger.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

# time | level | message, without module names
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
_DATEFMT = "%H:%M:%S"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

PACKAGE_LOGGER = "protmatch"


def _handlers_for(log_file: Optional[Union[str, Path]]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def init_logger(
    level: str = "WARNING",
    log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Route log records to stdout, and to log_file when given.

    Replaces any handlers installed by an earlier call, so running the
    entry point twice in one process does not duplicate output.

    Args:
        level: One of LOG_LEVELS, case-insensitive
        log_file: Optional file that receives a copy of every record

    Returns:
        The package logger
    """
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of {LOG_LEVELS}")

    logging.basicConfig(
        level=getattr(logging, name),
        format=_LOG_FORMAT,
        datefmt=_DATEFMT,
        handlers=_handlers_for(log_file),
        force=True,
    )
    return logging.getLogger(PACKAGE_LOGGER)
