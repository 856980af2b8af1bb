"""Configuration management module."""

from nslog.core.config.settings import ENV_PREFIX, ConfigManager, load_config_from_env

__all__ = ["ConfigManager", "ENV_PREFIX", "load_config_from_env"]
