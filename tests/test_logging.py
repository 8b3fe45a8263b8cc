import logging

import pytest

from anything_api.core.logging import (
    LoggingContextFilter,
    configure_logging,
    correlation_id_var,
    user_id_var,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_uses_placeholders_outside_a_request():
    record = _record()
    assert LoggingContextFilter().filter(record)
    assert record.correlation_id == "-"
    assert record.user_id == "-"


def test_filter_copies_context_values():
    cid_token = correlation_id_var.set("cid-9")
    user_token = user_id_var.set(7)
    try:
        record = _record()
        LoggingContextFilter().filter(record)
    finally:
        correlation_id_var.reset(cid_token)
        user_id_var.reset(user_token)
    assert record.correlation_id == "cid-9"
    assert record.user_id == "7"


def test_configure_logging_accepts_level_names():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert logging.getLogger("passlib").level == logging.WARNING
    finally:
        configure_logging(previous)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")
