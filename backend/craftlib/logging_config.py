"""
Logging setup for the Craft Library

The root logger writes to stdout (and optionally LOG_FILE) in the
LOG_FORMAT chosen in settings. Writes to projects, sessions and the stash
also go to the "audit" logger through audit_log().
"""
import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from craftlib.core.settings import settings

AUDIT_LOGGER = "audit"

# Present on every LogRecord; anything else was passed through extra=
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "taskName"}


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}


class JSONFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message, extras"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.levelno >= logging.ERROR:
            entry["location"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        entry.update(_extras(record))
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """`2024-01-01 12:00:00 [INFO] craftlib.main: message key=value`"""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        line = f"{stamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        extras = " ".join(f"{k}={v}" for k, v in _extras(record).items())
        if extras:
            line = f"{line} {extras}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class AuditFormatter(logging.Formatter):
    """JSON audit entries; empty fields are left out"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event": getattr(record, "event", record.getMessage()),
            "resource_type": getattr(record, "resource_type", None),
            "resource_id": getattr(record, "resource_id", None),
            "details": getattr(record, "details", None),
        }
        return json.dumps({k: v for k, v in entry.items() if v is not None}, default=str)


def _rotating_file(path: str, formatter: logging.Formatter) -> logging.Handler:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(path, maxBytes=10 * 1024 * 1024, backupCount=5)
    handler.setFormatter(formatter)
    return handler


def setup_logging() -> None:
    """Configure the root and audit loggers from settings. Safe to call twice."""
    formatter = JSONFormatter() if settings.LOG_FORMAT == "json" else TextFormatter()

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)
    if settings.LOG_FILE:
        root.addHandler(_rotating_file(settings.LOG_FILE, formatter))

    audit = logging.getLogger(AUDIT_LOGGER)
    audit.setLevel(logging.INFO)
    audit.handlers.clear()
    audit.propagate = False
    if settings.AUDIT_LOG_FILE:
        audit.addHandler(_rotating_file(settings.AUDIT_LOG_FILE, AuditFormatter()))
    if settings.DEBUG:
        echo = logging.StreamHandler(sys.stdout)
        echo.setFormatter(AuditFormatter())
        audit.addHandler(echo)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if not settings.DB_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def audit_log(
    event: str,
    *,
    resource_type: Optional[str] = None,
    resource_id: Optional[Any] = None,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Record a write, e.g. audit_log("SESSION_LOGGED", resource_type="session",
    resource_id=39, details={"project_id": 3}).
    """
    logging.getLogger(AUDIT_LOGGER).info(
        event,
        extra={
            "event": event,
            "resource_type": resource_type,
            "resource_id": resource_id,
            "details": details or {},
        },
    )
