"""
pdmonitor/logging_config.py
───────────────────────────
Application-wide logging setup.

The HTTP trace logger (``pdmonitor.trace``) is routed through a
QueueHandler so request/response tracing never blocks a callback.
"""
from __future__ import annotations

import atexit
import logging
import queue
from logging.config import dictConfig
from logging.handlers import QueueHandler, QueueListener
from typing import Iterable, Sequence

from config.settings import settings

TRACE_LOGGER = "pdmonitor.trace"

_DEFAULT_EXTRA_KEYS = (
    "view",
    "method",
    "path",
    "status",
    "equipment_id",
    "device_id",
    "page",
    "reason",
)

_configured = False
_listener: QueueListener | None = None


class ContextualFormatter(logging.Formatter):

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        extra_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._extra_keys: Sequence[str] = tuple(extra_keys or _DEFAULT_EXTRA_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context_parts: list[str] = []
        for key in self._extra_keys:
            value = getattr(record, key, None)
            if value is None:
                continue
            context_parts.append(f"{key}={value}")
        if context_parts:
            return f"{message} | {' '.join(context_parts)}"
        return message


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging plus the queued HTTP trace logger."""
    global _configured, _listener
    if _configured:
        return

    log_level = level if level is not None else settings.LOG_LEVEL

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "contextual": {
                    "()": "pdmonitor.logging_config.ContextualFormatter",
                    "fmt": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                    "style": "%",
                    "extra_keys": list(_DEFAULT_EXTRA_KEYS),
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "level": log_level,
                    "formatter": "contextual",
                }
            },
            "root": {"handlers": ["default"], "level": log_level},
        }
    )

    # Trace records are handed to a background listener thread
    root_handlers = logging.getLogger().handlers
    trace_queue: queue.SimpleQueue = queue.SimpleQueue()
    _listener = QueueListener(trace_queue, *root_handlers, respect_handler_level=True)
    _listener.start()
    atexit.register(_listener.stop)

    trace_logger = logging.getLogger(TRACE_LOGGER)
    trace_logger.addHandler(QueueHandler(trace_queue))
    trace_logger.propagate = False

    _configured = True
