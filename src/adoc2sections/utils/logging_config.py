"""Logging setup shared by the server and command line entry points."""

from __future__ import annotations

import logging
import os

# Attributes every LogRecord carries; anything else was passed via ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra={...}`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {
            key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS
        }
        if not extras:
            return message
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} | {rendered}"


def configure_logging(level: str | int | None = None) -> None:
    """Install the extras-aware formatter on the root logger.

    The level defaults to the ``LOG_LEVEL`` environment variable, then INFO.
    """
    resolved = level or os.getenv("LOG_LEVEL") or "INFO"
    if isinstance(resolved, str):
        resolved = resolved.upper()
    handler = logging.StreamHandler()
    handler.setFormatter(ExtraFormatter(DEFAULT_LOG_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
