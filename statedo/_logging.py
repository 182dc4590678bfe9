"""Structured logging for statedo.

Loggers are structlog bound loggers wrapping standard-library loggers, so the
host application's ``logging`` setup decides what is shown. Nothing is printed
unless the ``statedo`` logger (or the root logger) is configured for it.
"""

from __future__ import annotations

import logging
import sys

import structlog

ROOT_LOGGER = "statedo"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by ``logging.getLogger(name)``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
    )


def configure_logging(level: int | str = logging.DEBUG) -> None:
    """Attach a stderr handler to the package logger (idempotent)."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    if not any(getattr(h, "_statedo", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler._statedo = True  # type: ignore[attr-defined]
        root.addHandler(handler)


__all__ = ("ROOT_LOGGER", "configure_logging", "get_logger")
