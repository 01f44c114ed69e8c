"""
Structured logging utilities for application logging
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from .config import LoggingSettings


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        request_id = getattr(record, "request_id", None)
        if request_id:
            log_obj["request_id"] = request_id

        # Add exception info if present
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Add extra fields if present
        if hasattr(record, "extra_data"):
            log_obj.update(record.extra_data)

        return json.dumps(log_obj, default=str)


TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """Configure the ``healthscript`` logger hierarchy.

    Handlers are attached once; calling again only updates the level.
    """
    settings = settings or LoggingSettings()
    logger = logging.getLogger("healthscript")
    logger.setLevel(settings.level)
    logger.propagate = False

    if not logger.handlers:
        formatter: logging.Formatter
        if settings.format == "json":
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(TEXT_FORMAT)

        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        if settings.file_path:
            file_handler = logging.FileHandler(settings.file_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def log_with_data(logger: logging.Logger, level: int, message: str, **data) -> None:
    """Log a message carrying structured fields for the JSON formatter."""
    logger.log(level, message, extra={"extra_data": data})
