from __future__ import annotations

import logging
import sys
from datetime import datetime

ROOT_LOGGER_NAME = "ytrss"


class LineFormatter(logging.Formatter):
    """Render records as ``[ 2026-10-19 14:03:22 ] : INFO : ytrss.batch : message``."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        line = f"[ {timestamp} ] : {record.levelname} : {record.name} : {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if isinstance(handler.formatter, LineFormatter)]


def setup_logger(level: str | int = logging.WARNING, stream=None) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Calling twice only adjusts the level; handlers added by others are left alone.
    if _own_handlers(logger):
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(LineFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger
