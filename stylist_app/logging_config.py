"""JSON logging for the stylist app with per-operation correlation ids.

Uploaded garment photos travel as data URLs or remote links and file names,
so anything that could identify a picture is masked before it is emitted.
"""

from __future__ import annotations

import contextlib
import contextvars
import dataclasses
import json
import logging
import uuid
from typing import Any, Dict, Iterator

_LOGGER = logging.getLogger(__name__)
CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)

# Attributes every LogRecord carries; anything else was passed through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}
IMAGE_FIELDS = frozenset({"image_url", "name", "file_name"})


class JsonFormatter(logging.Formatter):
    """Render a record and its ``extra`` fields as one JSON object."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and key not in payload:
                payload[key] = redact_for_log(value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: int | str = "INFO") -> None:
    """Route the root logger through a single JSON stream handler."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def _mask_image_reference(value: str) -> str:
    lowered = value.lower()
    if lowered.startswith(("http://", "https://", "data:", "blob:")):
        return "[redacted-url]"
    return value


def redact_for_log(payload: Any) -> Any:
    """Recursively mask image references in a loggable value."""

    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        payload = dataclasses.asdict(payload)
    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, str):
        return _mask_image_reference(payload)
    if isinstance(payload, (list, tuple)):
        return [redact_for_log(value) for value in payload]
    if isinstance(payload, dict):
        return {
            key: "[redacted]" if key in IMAGE_FIELDS else redact_for_log(value)
            for key, value in payload.items()
        }
    return str(payload)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Adopt ``correlation_id``, else reuse the current one or mint a new one."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    fresh = uuid.uuid4().hex
    CORRELATION_ID.set(fresh)
    return fresh


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    token = CORRELATION_ID.set(correlation_id or ensure_correlation_id())
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with redacted fields attached as JSON keys."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


@contextlib.contextmanager
def operation_context(name: str, **attributes: Any) -> Iterator[str]:
    """Scope a correlation id around one named operation."""

    with correlation_context(attributes.pop("correlation_id", None)) as scoped_id:
        log_event(_LOGGER, logging.DEBUG, "operation_started", operation=name, **attributes)
        yield scoped_id


__all__ = [
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
    "JsonFormatter",
]
