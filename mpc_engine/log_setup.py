"""Global logging initialisation: console output plus daily JSON log files."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LEVEL_VARIABLE = "LOG_LEVEL"
LOG_FILENAME = "history.log"

_MARKER = "_mpc_engine_handler"
_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 10,
}
_STANDARD_ATTRIBUTES = set(
    vars(logging.LogRecord("", 0, "", 0, "", None, None))
) | {"message", "asctime"}
_CONSOLE_FORMAT = (
    "%(asctime)s %(levelname)s %(threadName)s(%(thread)d) "
    "%(name)s %(filename)s:%(lineno)d: %(message)s"
)

logger = logging.getLogger(__name__)


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        fields = {
            key: value
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRIBUTES
        }
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "target": record.name,
            "filename": record.pathname,
            "line_number": record.lineno,
            "threadId": record.thread,
            "threadName": record.threadName,
            "message": record.getMessage(),
            "fields": fields,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _resolve_level() -> tuple[int, str | None]:
    raw = os.environ.get(LEVEL_VARIABLE)
    if raw is None:
        return logging.INFO, f"environment variable {LEVEL_VARIABLE} is not set"
    level = _LEVELS.get(raw.strip().lower())
    if level is None:
        return logging.INFO, f"invalid log level {raw!r}"
    return level, None


def init_logging(service_name: str, log_directory: str | os.PathLike = "logs") -> bool:
    """Install console and JSON file logging on the root logger.

    Returns False without changes if logging was already initialised.
    """
    root = logging.getLogger()
    if any(getattr(handler, _MARKER, False) for handler in root.handlers):
        return False

    level, problem = _resolve_level()

    directory = Path(log_directory)
    directory.mkdir(parents=True, exist_ok=True)
    file_handler = TimedRotatingFileHandler(
        directory / LOG_FILENAME, when="midnight", encoding="utf-8"
    )
    file_handler.setFormatter(_JsonFormatter())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    for handler in (console_handler, file_handler):
        setattr(handler, _MARKER, True)
        root.addHandler(handler)
    root.setLevel(level)

    if problem is not None:
        logger.warning("Failed to initialize environment filter: %s", problem)
    logger.info("Logging initialized.", extra={"service": service_name})
    return True