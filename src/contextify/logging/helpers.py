from __future__ import annotations

"""Small logging helpers to standardize contextify logger names and configuration.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'contextify' logger.
    - get_logger: Namespaced logger factory ('contextify.*').
    - log_context: Helper building the ``extra`` mapping for structured fields.

Structured fields are attached to a record as ``context`` so both formatters
can use them: the JSON formatter emits them under ``ctx`` and the plain
formatter appends them as ``key=value`` pairs.
"""

import logging
import os
from typing import Any, Dict, Optional, TextIO

BASE_LOGGER = "contextify"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'contextify.io.walker').
        - msg: Formatted message string.
        - version: contextify.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        """Resolve the package version lazily to avoid import cycles."""
        try:
            from contextify import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("CONTEXTIFY_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload: Dict[str, Any] = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False, default=str)


class PlainLogFormatter(logging.Formatter):
    """``LEVEL: message key=value ...`` for humans reading stderr."""

    def __init__(self) -> None:
        super().__init__("%(levelname)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            line += " " + " ".join(f"{k}={v}" for k, v in ctx.items())
        return line


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'contextify' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default). When the base logger is
            already configured, a given stream replaces the one its stream
            handlers write to; None keeps the current stream.

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER)
    if base.handlers:
        base.setLevel(level)
        for handler in base.handlers:
            handler.setFormatter(JsonLogFormatter() if json_logs else PlainLogFormatter())
            if stream is not None and isinstance(handler, logging.StreamHandler):
                handler.setStream(stream)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else PlainLogFormatter())
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'contextify'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def log_context(**ctx: Any) -> Dict[str, Any]:
    """Return the ``extra`` mapping carrying structured fields."""
    return {"context": ctx}
