"""Configuration management for PHP Bridge."""

from php_bridge.config.schema import AppConfig
from php_bridge.config.manager import ConfigManager

__all__ = ["AppConfig", "ConfigManager"]
