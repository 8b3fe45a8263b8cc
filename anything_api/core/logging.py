from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Optional

# Request-scoped values stamped onto every log record
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
user_id_var: ContextVar[Optional[int]] = ContextVar("user_id", default=None)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | cid=%(correlation_id)s | user=%(user_id)s | %(message)s"

# Chatty third-party loggers kept at WARNING unless the root level is stricter.
# passlib logs a traceback at INFO/DEBUG while probing the bcrypt version.
_NOISY_LOGGERS = ("passlib", "sqlalchemy.engine", "uvicorn.access")


class LoggingContextFilter(logging.Filter):
    """
    Logging filter that copies the correlation id and authenticated user id
    from contextvars onto each record, using "-" when unset.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.correlation_id = correlation_id_var.get() or "-"
        user_id = user_id_var.get()
        record.user_id = "-" if user_id is None else str(user_id)
        return True


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


# PUBLIC_INTERFACE
def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Route all logging to stdout through LOG_FORMAT.

    `level` may be a number or a name such as "info" (LOG_LEVEL). Calling it
    again replaces the previous handler.
    """
    numeric = _resolve_level(level)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(LoggingContextFilter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(numeric)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))
