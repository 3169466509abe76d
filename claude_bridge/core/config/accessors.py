"""Runtime config value accessors.

These functions provide config values at runtime without requiring
direct config imports, so conversion code never captures a stale
module-level config.

Config Context Propagation:
    Config is propagated via ContextVar for O(1) lookup. Callers that
    need a scoped configuration (tests, embedding applications) use
    config_context(); everything else falls back to the global singleton.

Usage:
    from claude_bridge.core.config.accessors import is_development
    if is_development():
        ...
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

_config_context: ContextVar[Config | None] = ContextVar("config_context", default=None)


def _current_config() -> Config:
    cfg = _config_context.get(None)
    if cfg is not None:
        return cfg
    # Lazy import to avoid loading the environment at import time of callers
    from .config import get_config

    return get_config()


def is_development() -> bool:
    """Whether per-block debug diagnostics are enabled."""
    return _current_config().is_development


def log_conversion_summary() -> bool:
    """Get the log_conversion_summary config value."""
    return _current_config().log_conversion_summary


def log_level() -> str:
    """Get the log_level config value."""
    return _current_config().log_level


def set_config_context(config: Config) -> None:
    """Manually set config context (useful for testing)."""
    _config_context.set(config)


def clear_config_context() -> None:
    """Clear config context, falling back to the global singleton."""
    _config_context.set(None)


@contextmanager
def config_context(config: Config) -> Generator[None, None, None]:
    """Scope a config to the current context.

    Usage:
        with config_context(Config()):
            convert_claude_to_openai(...)
    """
    token = _config_context.set(config)
    try:
        yield
    finally:
        _config_context.reset(token)
