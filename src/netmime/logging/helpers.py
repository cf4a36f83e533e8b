from __future__ import annotations

"""Small logging helpers to standardize netmime logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration for the 'netmime' base logger.
    - get_logger: Namespaced logger factory ('netmime.*').
    - trace utilities gated by NETMIME_TRACE.

Design notes:
    - The package never attaches handlers at import time; callers (or the
      runtime settings) opt in through `setup_base_logger`.
    - The version is resolved lazily to avoid circular imports and falls
      back to 'unknown'.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from netmime.core.interfaces.logging import LoggerLikeProtocol

BASE_LOGGER_NAME = "netmime"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'netmime.resolver').
        - msg: Formatted message string.
        - version: netmime.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from netmime import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("NETMIME_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'netmime' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    if base.handlers:
        base.setLevel(level)
        return base

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'netmime'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


def is_trace_enabled() -> bool:
    """Check if lookup tracing is enabled via env flag."""
    return os.getenv("NETMIME_TRACE") == "1"


def trace(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity lookup traces only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Structured context attached to the record as 'context'.
    """
    if not is_trace_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
