"""Shared pytest configuration and fixtures for Claude Bridge tests."""

import logging
from typing import Any

import pytest

from claude_bridge.conversion.pipeline.base import ConversionContext
from claude_bridge.core.config import Config
from claude_bridge.core.config.accessors import clear_config_context, set_config_context
from claude_bridge.core.logging import CorrelationFormatter


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast, no external deps)")


def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(scope="function", autouse=True)
def isolated_environment(monkeypatch):
    """Give every test production-mode defaults and untouched root logging.

    Ignores whatever .env or shell environment the suite runs in.
    """
    for name in ("LOG_LEVEL", "LOG_CONVERSION_SUMMARY", "BRIDGE_ENV"):
        monkeypatch.delenv(name, raising=False)
    Config.reset_singleton()
    clear_config_context()

    root_logger = logging.getLogger()
    original_level = root_logger.level

    yield

    # Drop handlers installed by configure_root_logging
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, CorrelationFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)
    clear_config_context()


@pytest.fixture
def development_mode(monkeypatch):
    """Switch the scoped config to development mode."""
    monkeypatch.setenv("BRIDGE_ENV", "development")
    cfg = Config()
    set_config_context(cfg)
    return cfg


@pytest.fixture
def build_context():
    """Factory for a fresh ConversionContext around a Claude request."""

    def _build(
        claude_request: dict[str, Any],
        *,
        is_count_tokens: bool = False,
        openai_request: dict[str, Any] | None = None,
    ) -> ConversionContext:
        return ConversionContext(
            claude_request=claude_request,
            openai_model="gpt-4o",
            is_count_tokens=is_count_tokens,
            openai_request=openai_request
            if openai_request is not None
            else {"model": "gpt-4o", "messages": [], "stream": False},
        )

    return _build
