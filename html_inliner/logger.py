# === FILE: html_inliner/logger.py ===
"""Logging setup for **html_inliner**.

Every module logs through the single named logger exported here::

    from html_inliner.logger import logger

Records go to *stderr* because the CLI may print the inlined HTML on stdout.
:func:`init_logging` can add a rotating log file as well.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "HtmlInliner"

_LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_FILE_BACKUPS: Final[int] = 3


def _build_handlers(log_file: Optional[Union[str, Path]]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                str(log_file),
                maxBytes=_LOG_FILE_MAX_BYTES,
                backupCount=_LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    return handlers


def init_logging(
    level: Union[int, str] = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Reset the project logger's handlers and level; return the logger."""
    project_logger = logging.getLogger(LOGGER_NAME)
    project_logger.setLevel(level)
    for old in list(project_logger.handlers):
        project_logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(log_format)
    for handler in _build_handlers(log_file):
        handler.setFormatter(formatter)
        project_logger.addHandler(handler)

    # the CLI owns the output streams; keep records away from the root logger
    project_logger.propagate = False
    return project_logger


logger: logging.Logger = init_logging()

__all__ = ["DEFAULT_FORMAT", "LOGGER_NAME", "init_logging", "logger"]
