"""Configuration management for llmrelay."""

from llmrelay.config.base import LoggingConfig, configure_logging
from llmrelay.config.user import UserConfig

__all__ = [
    "LoggingConfig",
    "UserConfig",
    "configure_logging",
]
