# vanfleet/utils/logger.py
"""
Centralised logging configuration for the entire application.
Logs to console and to a rotating file in /logs/ (LOG_DIR).
Service modules log through a tagged adapter so each line carries its
component, e.g. "[AVERIAS] Deleted breakdown 4 (van 2)".
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from vanfleet.config import settings

LOG_LEVEL = settings.LOG_LEVEL.upper()
LOG_DIR = settings.LOG_DIR or os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs")

_configured = False


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setLevel(LOG_LEVEL)
    console.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)
    root.addHandler(console)

    # Rotating file handler, keeps last 10 × 5MB log files
    os.makedirs(LOG_DIR, exist_ok=True)
    file_handler = RotatingFileHandler(
        filename=os.path.join(LOG_DIR, "vanfleet.log"),
        maxBytes=5 * 1024 * 1024,
        backupCount=10,
        encoding="utf-8",
    )
    file_handler.setLevel(LOG_LEVEL)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    # SQL statements go through the shared handlers only when DB_ECHO is set
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DB_ECHO else logging.WARNING)


class TaggedLogger(logging.LoggerAdapter):
    """Prefixes every message with a component tag, e.g. ``[VANS] Created van 3``."""

    def __init__(self, logger: logging.Logger, tag: str):
        super().__init__(logger, {"tag": tag})

    def process(self, msg, kwargs):
        return f"[{self.extra['tag']}] {msg}", kwargs


def get_logger(name: str, tag: str = None):
    """
    Get a named logger. Call this at the top of every module.
    Services pass a tag (VANS, AVERIAS, STORE, ...) so their lines can be
    grepped per component in the shared log file.
    """
    _configure_root_logger()
    logger = logging.getLogger(name)
    if tag:
        return TaggedLogger(logger, tag.upper())
    return logger
