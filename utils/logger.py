# -*- coding: utf-8 -*-
"""
Logging for the Hami desktop client.

Every module logs through a child of the `hami` logger. The file log keeps
DEBUG detail across restarts (signup drafts, branch decisions, storage
writes); the console only shows INFO and above.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from app.config import Config

ROOT_LOGGER_NAME = "hami"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

_root: Optional[logging.Logger] = None


def _file_handler() -> logging.Handler:
    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger() -> logging.Logger:
    """
    Configure the `hami` logger from Config and return it.

    Calling it again replaces the handlers instead of stacking them, so the
    entry point may call it after modules already logged.
    """
    global _root

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, Config.LOG_LEVEL, logging.DEBUG))

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.addHandler(_file_handler())
    root.addHandler(_console_handler())

    _root = root
    return root


def get_logger(name: str) -> logging.Logger:
    """Child of the `hami` logger for a module, configuring it on first use."""
    if _root is None:
        setup_logger()

    return _root.getChild(name)
