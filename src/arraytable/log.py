"""Logging setup for the arraytable CLI."""

from __future__ import annotations

import logging

_STANDARD_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class TextFormatter(logging.Formatter):
    """Formatter that appends ``extra=`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        extras = {
            key: value for key, value in record.__dict__.items() if key not in _STANDARD_ATTRS
        }
        if extras:
            extra_pairs = " ".join(f"{key}={value}" for key, value in extras.items())
            msg = f"{msg} | {extra_pairs}"
        return msg


def setup_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the ``arraytable`` logger.

    Repeated calls replace the handler installed by the previous call.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        level = resolved

    logger = logging.getLogger("arraytable")
    for old in [h for h in logger.handlers if isinstance(h.formatter, TextFormatter)]:
        logger.removeHandler(old)

    handler = logging.StreamHandler()
    handler.setFormatter(TextFormatter(DEFAULT_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
