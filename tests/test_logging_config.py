import logging

from conversation_core.config.logging_config import (
    NO_CORRELATION_ID,
    CorrelationIdFilter,
    SafeFormatter,
    correlation_id_var,
)


def _record():
    return logging.LogRecord("conversation_core.test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_stamps_current_correlation_id():
    token = correlation_id_var.set("req-42")
    try:
        record = _record()
        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-42"
    finally:
        correlation_id_var.reset(token)


def test_formatter_tolerates_unfiltered_records():
    formatter = SafeFormatter("[%(correlation_id)s] %(message)s")
    assert formatter.format(_record()) == f"[{NO_CORRELATION_ID}] hello"
