"""Logging setup for erpledger.

Modules log through ``get_logger(__name__)`` with event-style messages and
structured ``extra`` fields; the CLI calls ``configure_logging`` once.
"""

import logging
import sys
import threading
from typing import Any

_LOGGER_PREFIX = "erpledger"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s%(fields)s"

_STDLIB_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName", "fields"}


class FieldsFormatter(logging.Formatter):
    """Append ``extra`` fields to the message as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        extras = {k: v for k, v in vars(record).items() if k not in _STDLIB_KEYS}
        record.fields = "".join(f" {k}={v}" for k, v in sorted(extras.items()))
        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the erpledger namespace."""
    if name == _LOGGER_PREFIX or name.startswith(f"{_LOGGER_PREFIX}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


_configured = False
_lock = threading.Lock()


def configure_logging(*, level: int = logging.WARNING, stream: Any = None) -> None:
    """Configure the erpledger logger hierarchy (idempotent)."""
    global _configured
    with _lock:
        if _configured:
            return
        _configured = True

    root_logger = logging.getLogger(_LOGGER_PREFIX)
    root_logger.setLevel(level)
    root_logger.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(FieldsFormatter(_FORMAT))
    root_logger.addHandler(handler)


def reset_logging() -> None:
    """Reset logging configuration. For tests."""
    global _configured
    with _lock:
        _configured = False
    logger = logging.getLogger(_LOGGER_PREFIX)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
