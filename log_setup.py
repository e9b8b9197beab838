"""Logging setup: rotating file log plus console output."""

import logging
import os
from logging.handlers import RotatingFileHandler

DEFAULT_LOG_FILE = os.path.join(os.path.expanduser("~"), ".prayer-calendar.log")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "prayer-calendar"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Configure the root logger once; later calls only adjust the level.

    A file handler is always installed because ``pythonw`` has no console.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return root

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console.set_name(_HANDLER_NAME)
    root.addHandler(console)

    path = log_file or DEFAULT_LOG_FILE
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    file_handler = RotatingFileHandler(
        path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
    file_handler.setFormatter(formatter)
    file_handler.set_name(_HANDLER_NAME + "-file")
    root.addHandler(file_handler)

    return root
