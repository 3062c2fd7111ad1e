"""Logging system unit tests."""

import json
import logging

from quote_compliance.core.logging import (
    JSONFormatter,
    LogContext,
    RequestIdFilter,
    get_request_id,
    set_request_id,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="quote_compliance.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Quote analyzed",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestRequestId:
    """Request ID context"""

    def test_set_and_get(self):
        assert set_request_id("req-1") == "req-1"
        assert get_request_id() == "req-1"

    def test_generated(self):
        request_id = set_request_id()
        assert len(request_id) == 8

    def test_filter_attaches_id(self):
        set_request_id("req-2")
        record = _record()
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "req-2"


class TestJSONFormatter:
    """Structured output"""

    def test_whitelisted_extras(self):
        record = _record(locale="fr-BE", score=23, notes="Prix fixe garanti")
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "Quote analyzed"
        assert data["locale"] == "fr-BE"
        assert data["score"] == 23
        assert "notes" not in data


class TestLogContext:
    """Operation timing"""

    def test_logs_start_and_completion(self, caplog):
        logger = logging.getLogger("quote_compliance.test")
        with caplog.at_level(logging.INFO, logger="quote_compliance.test"):
            with LogContext(logger, "quote analysis", locale="fr-BE"):
                pass
        messages = [r.getMessage() for r in caplog.records if r.name == "quote_compliance.test"]
        assert messages == ["quote analysis started", "quote analysis completed"]
