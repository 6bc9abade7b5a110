"""
Process logging for the HackHub backend.

Four named loggers live under the ``hackhub`` namespace:

- api: request access lines, exception handlers, route-level warnings
- services: business operations that are not persisted to the app log
- db: engine lifecycle and failed application log writes
- auth: OAuth login flow and session handling

Production writes one JSON object per line to a rotating file per logger
(``<HACKHUB_LOG_DIR>/<name>.log``). Every other environment prints a
short human-readable line to stdout. Level and directory come from
AppSettings.

These are operator logs. Audit entries that admins query through
/api/logs go through the AppLogger in services/app_log_service.py.
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from hackhub.config.settings import get_settings


LOGGER_NAMES = ("api", "services", "db", "auth")

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

# Attributes every LogRecord carries; anything else came from extra={...}
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Fields passed through ``extra={...}`` (correlation_id, event_id,
    duration_ms, ...) are merged into the top-level object so log
    shippers can index them without parsing the message.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        payload.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ConsoleFormatter(logging.Formatter):
    """``[10:30:45] INFO hackhub.api: GET /api/events -> 200``"""

    def __init__(self):
        super().__init__(
            fmt="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )


def _build_handler(name: str, production: bool, log_dir: Path) -> logging.Handler:
    if not production:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ConsoleFormatter())
        return handler

    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_dir / f"{name}.log",
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(JSONFormatter())
    return handler


def configure_logging() -> Dict[str, logging.Logger]:
    """
    (Re)build the handlers of every named logger from current settings.

    Returns:
        Mapping of short name ("api", ...) to its Logger
    """
    settings = get_settings()
    level = getattr(logging, settings.log_level)
    log_dir = Path(settings.log_dir)

    configured = {}
    for name in LOGGER_NAMES:
        logger = logging.getLogger(f"hackhub.{name}")
        logger.setLevel(level)
        logger.propagate = False
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        logger.addHandler(_build_handler(name, settings.is_production, log_dir))
        configured[name] = logger
    return configured


_loggers: Optional[Dict[str, logging.Logger]] = None


def get_logger(name: str) -> logging.Logger:
    """
    Return one of the named loggers, configuring them on first use.

    Raises:
        ValueError: If name is not one of LOGGER_NAMES

    Example:
        >>> get_logger("db").error("Write failed", extra={"correlation_id": cid})
    """
    global _loggers
    if name not in LOGGER_NAMES:
        raise ValueError(f"Unknown logger name: {name}. Valid names: {', '.join(LOGGER_NAMES)}")
    if _loggers is None:
        _loggers = configure_logging()
    return _loggers[name]


def init_logging() -> Dict[str, logging.Logger]:
    """Configure logging at application startup."""
    global _loggers
    _loggers = configure_logging()
    return _loggers
