import json
import logging
import os
import sys
from datetime import datetime, timezone


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        # Fields passed via logger.info("msg", extra={...})
        for key in ("method", "path", "status", "career_path_id", "difficulty",
                    "used_fallback", "error_type"):
            if hasattr(record, key):
                entry[key] = getattr(record, key)

        if record.levelno >= logging.WARNING:
            entry["source"] = f"{record.filename}:{record.lineno}"

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = {
                "type": type(record.exc_info[1]).__name__,
                "message": str(record.exc_info[1]),
            }

        return json.dumps(entry, default=str)


class SimpleFormatter(logging.Formatter):
    """Human-readable formatter for local development"""

    def __init__(self):
        super().__init__(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )


def setup_logger(name: str = "career_projects", level: str = "INFO") -> logging.Logger:
    """
    Setup the application logger.

    Outputs JSON lines to stdout when LOG_FORMAT=json (log drain ingestion),
    a readable one-line format otherwise. Module loggers created with
    logging.getLogger(__name__) inside the package propagate here.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Don't add handlers if they already exist
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    if os.getenv("LOG_FORMAT") == "json":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(SimpleFormatter())

    logger.addHandler(handler)
    return logger
