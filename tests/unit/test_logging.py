import logging

import pytest

from claude_bridge.core.logging import (
    ConversationLogger,
    CorrelationFormatter,
    configure_root_logging,
    format_context,
)


def _record(msg="hello", **attrs):
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestCorrelationFormatter:
    def test_adds_correlation_id(self):
        formatter = CorrelationFormatter("%(message)s")
        formatted = formatter.format(_record(correlation_id="1234567890"))
        assert formatted.startswith("[12345678] hello")

    def test_appends_structured_context(self):
        formatter = CorrelationFormatter("%(message)s")
        record = _record(context={"messageIndex": 2, "source": {"type": "url"}})

        assert formatter.format(record) == 'hello | messageIndex=2 source={"type": "url"}'

    def test_formatting_twice_does_not_duplicate_prefix(self):
        formatter = CorrelationFormatter("%(message)s")
        record = _record(correlation_id="abcdefghij")

        formatter.format(record)
        assert formatter.format(record) == "[abcdefgh] hello"

    def test_plain_record(self):
        assert CorrelationFormatter("%(message)s").format(_record()) == "hello"


@pytest.mark.unit
class TestFormatContext:
    def test_renders_key_value_pairs(self):
        assert format_context({"a": 1, "b": "x", "c": None}) == "a=1 b=x c=None"


@pytest.mark.unit
class TestConversationLogger:
    def test_logger_name(self):
        assert ConversationLogger.get_logger().name == "conversation"

    def test_correlation_context_tags_records(self, caplog):
        logger = ConversationLogger.get_logger()

        with caplog.at_level(logging.INFO, logger="conversation"):
            with ConversationLogger.correlation_context("req-123"):
                logger.info("inside")
            logger.info("outside")

        inside, outside = caplog.records
        assert inside.correlation_id == "req-123"
        assert not hasattr(outside, "correlation_id")


@pytest.mark.unit
class TestConfigureRootLogging:
    def test_installs_single_correlation_handler(self):
        configure_root_logging("DEBUG")

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, CorrelationFormatter)
        assert root_logger.level == logging.DEBUG

    def test_uses_configured_level_by_default(self, monkeypatch):
        from claude_bridge.core.config import Config

        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        Config.reset_singleton()

        configure_root_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_falls_back_to_info(self):
        configure_root_logging("chatty")
        assert logging.getLogger().level == logging.INFO
