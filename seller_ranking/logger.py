import logging
import sys
from logging.handlers import RotatingFileHandler

from . import settings

CONSOLE_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def _console_handler(log_level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(log_level: int, log_filename: str) -> logging.Handler:
    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        settings.LOG_DIR / log_filename,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    name: str | None = None,
    log_level: int = logging.INFO,
    log_filename: str = "leaderboard.log",
) -> logging.Logger:
    """
    Configures `name` (the root logger by default) for a leaderboard run:
    plain messages on stdout, timestamped records in LOG_DIR/`log_filename`.

    If the logger, or one of its ancestors, already has handlers only the
    level is updated, so repeated runs in one process never duplicate output.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if not logger.hasHandlers():
        logger.addHandler(_console_handler(log_level))
        logger.addHandler(_file_handler(log_level, log_filename))

    return logger
