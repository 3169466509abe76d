"""Configuration singleton for Claude Bridge.

This module provides a simple singleton that gives direct access to
configuration values loaded from environment variables. The singleton is
built on first use, never at import time, so `claude-bridge config validate`
can report bad values before anything else reads them.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from claude_bridge.core.config.schema import ConfigSchema, EnvVarSpec
from claude_bridge.core.config.validation import ConfigError, load_env_var

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings.

    Attributes:
        log_level: Root log level name, comments stripped
        log_conversion_summary: Whether conversion start/finish milestones are logged
    """

    log_level: str
    log_conversion_summary: bool


@dataclass(frozen=True)
class RuntimeConfig:
    environment: str


class Config:
    """Configuration singleton with direct access to all settings.

    All values are loaded at initialization time from environment variables
    using schema-based validation. Raises ConfigError on invalid values.

    Args:
        load: Resolves one EnvVarSpec to its value. Defaults to reading the
            environment; `Config.defaults()` passes a loader that ignores it.
    """

    def __init__(self, load: Callable[[EnvVarSpec], Any] = load_env_var) -> None:
        # Extract just the first word to tolerate trailing comments in .env files
        log_level = load(ConfigSchema.LOG_LEVEL).split()[0].upper()
        self._logging = LoggingConfig(
            log_level=log_level,
            log_conversion_summary=load(ConfigSchema.LOG_CONVERSION_SUMMARY),
        )
        self._runtime = RuntimeConfig(environment=load(ConfigSchema.BRIDGE_ENV))

    @classmethod
    def defaults(cls) -> "Config":
        """Build a config from schema defaults, ignoring the environment."""
        return cls(load=lambda spec: spec.default)

    # Logging settings
    @property
    def log_level(self) -> str:
        return self._logging.log_level

    @property
    def log_conversion_summary(self) -> bool:
        return self._logging.log_conversion_summary

    # Runtime settings
    @property
    def environment(self) -> str:
        return self._runtime.environment

    @property
    def is_development(self) -> bool:
        return self._runtime.environment == "development"

    @classmethod
    def reset_singleton(cls) -> None:
        """Reset the global config singleton for test isolation.

        The next get_config() call rebuilds it from the modified environment.

        WARNING: Never call this in production code!
        """
        global config
        config = None


def get_config() -> Config:
    """Return the module-level singleton, building it on first use.

    Configuration only controls diagnostics, so an invalid environment is
    reported once and the schema defaults are used instead. Run
    `claude-bridge config validate` to list every offending variable.
    """
    global config
    if config is None:
        try:
            config = Config()
        except ConfigError as e:
            logger.warning(f"Invalid configuration, using defaults: {e}")
            config = Config.defaults()
    return config


# Module-level singleton, built lazily by get_config()
config: Config | None = None
