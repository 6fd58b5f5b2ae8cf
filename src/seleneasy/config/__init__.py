"""Configuration management for browser automation."""

from .environment import (
    get_env_config,
    env_flag,
    validate_browser,
)

__all__ = [
    "get_env_config",
    "env_flag",
    "validate_browser",
]
