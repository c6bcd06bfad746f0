"""Simple logging utilities for searchmoji.

Standard Logger Initialization Pattern
--------------------------------------
For most modules, use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

Configuration happens once at the application level through `setup_logging()`.
Log records go to a rotating file because writing to stderr corrupts the TUI.

Use `get_logger()` only when you need immediate file-based logging
with auto-configuration (e.g., for modules that may run standalone).
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config.constants import (
    LOG_BACKUP_COUNT,
    LOG_FILE_NAME,
    MAX_LOG_BYTES,
    SEARCHMOJI_CONFIG_DIR,
)

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(log_dir: Path) -> RotatingFileHandler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT
    )
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def setup_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Configure the ``searchmoji`` logger hierarchy to write to the log file.

    Safe to call more than once; existing file handlers are replaced.

    Returns:
        Path of the log file.
    """
    log_dir = log_dir or SEARCHMOJI_CONFIG_DIR
    root = logging.getLogger("searchmoji")
    for existing in list(root.handlers):
        if isinstance(existing, RotatingFileHandler):
            root.removeHandler(existing)
            existing.close()

    root.addHandler(_file_handler(log_dir))
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return log_dir / LOG_FILE_NAME


def get_logger(name: str, log_dir: Optional[Path] = None) -> logging.Logger:
    """Get a logger instance for the given module name."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = _file_handler(log_dir or SEARCHMOJI_CONFIG_DIR)
        handler.setLevel(logging.INFO)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
