"""
Structured logging.

Loggers obtained through get_logger() accept keyword context fields:

    logger = get_logger(__name__)
    logger.info("Project created", entity_id=project.id, owner=mask_owner_id(owner_id))

The fields travel on the record as ``extra_data``. Production renders JSON
lines, development a coloured single line. Both include the request
correlation ID when one is bound.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from shared.config.settings import settings

# Third-party loggers and the level they are capped at
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "httpx": logging.WARNING,
}


def _request_id(record: logging.LogRecord) -> str | None:
    request_id = getattr(record, "request_id", None)
    return request_id if request_id and request_id != "-" else None


class StructuredFormatter(logging.Formatter):
    """One JSON object per line, for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = _request_id(record)
        if request_id:
            entry["request_id"] = request_id
        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            entry["data"] = extra_data
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        if settings.debug:
            entry["source"] = f"{record.filename}:{record.lineno}"
        return json.dumps(entry, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Readable coloured output for local runs."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        parts = [
            f"{color}{datetime.now():%H:%M:%S} {record.levelname:<8}{self.RESET}",
        ]
        request_id = _request_id(record)
        if request_id:
            parts.append(f"[{request_id[:8]}]")
        parts.append(f"{record.name}: {record.getMessage()}")

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            parts.append("(" + ", ".join(f"{k}={v}" for k, v in extra_data.items()) + ")")

        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class StructuredLogger(logging.Logger):
    """Logger whose level methods take keyword context fields."""

    def _log(  # type: ignore[override]
        self,
        level: int,
        msg: object,
        args: Any,
        exc_info: Any = None,
        extra: dict[str, Any] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        **fields: Any,
    ) -> None:
        if fields:
            extra = {**(extra or {}), "extra_data": fields}
        # One extra frame so the record points at the caller, not this method
        super()._log(
            level,
            msg,
            args,
            exc_info=exc_info,
            extra=extra,
            stack_info=stack_info,
            stacklevel=stacklevel + 1,
        )


logging.setLoggerClass(StructuredLogger)


def setup_logging() -> None:
    """
    Install the stdout handler on the root logger. Call once at startup.
    """
    # Imported here: correlation imports this module's settings chain
    from shared.infrastructure.correlation import CorrelationIdFilter

    level = logging.DEBUG if settings.debug else logging.INFO
    formatter = StructuredFormatter() if settings.environment == "production" else DevelopmentFormatter()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name, cap in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(cap)


def get_logger(name: str) -> StructuredLogger:
    """Logger for a module: ``logger = get_logger(__name__)``."""
    return logging.getLogger(name)  # type: ignore


def mask_owner_id(owner_id: str | None) -> str:
    """Keep only a short prefix of an owner ID for audit lines."""
    if not owner_id:
        return "<no-owner>"
    if len(owner_id) <= 4:
        return owner_id[0] + "***"
    return f"{owner_id[:4]}***"


portfolio_api_logger = get_logger("portfolio_api")
security_audit_logger = get_logger("security.audit")


def audit_ownership_denied(entity: str, record_id: str, owner_id: str, **extra: Any) -> None:
    """Record an attempt to address a record that belongs to another owner."""
    security_audit_logger.warning(
        "OWNERSHIP_AUDIT: DENIED",
        entity=entity,
        record_id=record_id,
        owner=mask_owner_id(owner_id),
        **extra,
    )
