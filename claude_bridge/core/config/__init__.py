from claude_bridge.core.config.config import Config, get_config
from claude_bridge.core.config.validation import ConfigError, validate_all

__all__ = ["Config", "ConfigError", "get_config", "validate_all"]
