# solidarity_client/logs.py
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import ClientConfig

LOGGER_NAME = "solidarity_client"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(level: str | int | None = None, log_file: str | Path | None = None) -> logging.Logger:
    """Attach stream (and optionally rotating file) handlers to the client's logger.

    Libraries normally leave this to the application; call it from scripts and
    notebooks. Calling it again only updates the level. Without ``level``, uses
    ``ClientConfig.log_level`` (``SOLIDARITY_TECH_LOG_LEVEL``).
    """
    if level is None:
        level = ClientConfig().log_level
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        fmt = logging.Formatter(LOG_FORMAT)

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(fmt)
        logger.addHandler(stream_handler)

        if log_file is not None:
            path = Path(log_file)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = RotatingFileHandler(path, maxBytes=5 * 1024 * 1024, backupCount=5)
                file_handler.setFormatter(fmt)
                logger.addHandler(file_handler)
            except OSError as exc:
                logger.warning("Failed to initialize file logging at %s: %s", path, exc)

    logger.propagate = False
    # request lines come from our own logger; silence the transport's duplicates
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger
