"""
Runtime Configuration Module

Provides configuration loading and management for the HTTP helpers.
"""

from .runtime import (
    HttpConfig,
    LoggingConfig,
    RuntimeConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "HttpConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "get_default_config",
    "set_default_config",
]
