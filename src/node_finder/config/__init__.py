"""Configuration management for node resolution."""

from .environment import (
    FinderConfig,
    get_env_config,
)

__all__ = [
    "FinderConfig",
    "get_env_config",
]
