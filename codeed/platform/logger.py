import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "codeed.log"

_file_handler: Optional[RotatingFileHandler] = None
_level = logging.INFO


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """
    Set the level and optional rotating log file shared by every logger
    handed out by get_logger. Called once from create_app.
    """
    global _file_handler, _level

    _level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(_level, int):
        _level = logging.INFO

    if log_dir and _file_handler is None:
        os.makedirs(log_dir, exist_ok=True)
        _file_handler = RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME), maxBytes=10_000_000, backupCount=5
        )
        _file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("codeed")
    root.setLevel(_level)
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(console_handler)
    if _file_handler is not None and _file_handler not in root.handlers:
        root.addHandler(_file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the ``codeed`` namespace so that it writes to the
    console AND, once configured, to the rotating log file.
    """
    if not name.startswith("codeed"):
        name = f"codeed.{name}"
    return logging.getLogger(name)
