# src/fbc_dashboard/infrastructure/logging/logger.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module exposes an idempotent root configurator and a per-module logger
factory that produce one JSON object per log line.

Features:
    * Stable keys: ``ts``, ``level``, ``logger``, ``message``.
    * Enrichment with ``correlation_id`` from a contextvar.
    * Every ``extra=`` field passed at the call site is copied into the
      payload (use cases log dotted event names with structured extras).

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
    log.info("activity.add.success", extra={"activity_id": "..."})
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_root_logging",
    "get_correlation_id",
    "get_json_logger",
    "set_correlation_id",
]

_LOG_LEVEL_ENV_KEY = "FBC_LOG_LEVEL"

# Task-local correlation id for one user action.
_CORRELATION_ID_CTX: ContextVar[str | None] = ContextVar("fbc_correlation_id", default=None)

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation id attached to every log line of the current context.

    Args:
        correlation_id: Identifier of the current user action, or ``None``
            to clear it.
    """
    _CORRELATION_ID_CTX.set(correlation_id)


def get_correlation_id() -> str | None:
    """Return the current correlation id from contextvars, if any."""
    return _CORRELATION_ID_CTX.get(None)


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and call-site extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            JSON-encoded log line.
        """
        payload: dict[str, Any] = {
            "ts": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Record attribute wins over the contextvar.
        cid = getattr(record, "correlation_id", None) or _CORRELATION_ID_CTX.get(None)
        if cid:
            payload["correlation_id"] = cid

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and key not in payload:
                payload[key] = value

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def configure_root_logging(level: str | int | None = None) -> None:
    """Initialize the root logger with a JSON stream handler (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use env
            ``FBC_LOG_LEVEL`` or ``INFO``.
    """
    root = logging.getLogger()

    env_level = os.getenv(_LOG_LEVEL_ENV_KEY)
    resolved: int | str = (
        level if level is not None else (env_level.upper() if env_level else "INFO")
    )
    root.setLevel(resolved.upper() if isinstance(resolved, str) else resolved)

    if any(isinstance(h.formatter, _JsonFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger backed by the JSON root handler.

    This does *not* implicitly configure the root logger. Call
    :func:`configure_root_logging` once at startup for global defaults.

    Args:
        name: Logger name, typically ``__name__`` of the caller.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
