import json
import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from claude_bridge.core.config.accessors import log_level as configured_log_level
from claude_bridge.core.config.schema import VALID_LOG_LEVELS

CONVERSATION_LOGGER_NAME = "conversation"


class ConversationLogger:
    """Logger with correlation ID support"""

    @staticmethod
    def get_logger() -> logging.Logger:
        """Get the logger conversion diagnostics are written to"""
        return logging.getLogger(CONVERSATION_LOGGER_NAME)

    @staticmethod
    @contextmanager
    def correlation_context(request_id: str) -> Generator[None, None, None]:
        """Context manager for correlation ID"""
        old_factory = logging.getLogRecordFactory()

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = old_factory(*args, **kwargs)
            record.correlation_id = request_id
            return record

        logging.setLogRecordFactory(record_factory)
        try:
            yield
        finally:
            logging.setLogRecordFactory(old_factory)


def format_context(context: dict[str, Any]) -> str:
    """Render a structured context payload as `key=value` pairs."""
    parts = []
    for key, value in context.items():
        if isinstance(value, (dict, list)):
            rendered = json.dumps(value, ensure_ascii=False, default=str)
        else:
            rendered = str(value)
        parts.append(f"{key}={rendered}")
    return " ".join(parts)


class CorrelationFormatter(logging.Formatter):
    """Prefixes the correlation ID and appends the structured context, if any."""

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        context = getattr(record, "context", None)
        if context:
            formatted = f"{formatted} | {format_context(context)}"
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            formatted = f"[{correlation_id[:8]}] {formatted}"
        return formatted


def configure_root_logging(level: str | None = None) -> None:
    """Install a single stream handler with CorrelationFormatter on the root logger.

    Args:
        level: Log level name; defaults to the configured LOG_LEVEL.
    """
    level_name = (level or configured_log_level()).upper()
    if level_name not in VALID_LOG_LEVELS:
        level_name = "INFO"

    handler = logging.StreamHandler()
    handler.setFormatter(
        CorrelationFormatter("%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level_name))

    logging.getLogger(__name__).debug(f"Root logging configured at {level_name}")
