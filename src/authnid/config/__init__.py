"""Configuration for authnid: logging setup and environment settings."""

from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    setup_logging,
)
from .settings import AuthnIdSettings, get_settings

__all__ = [
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "setup_logging",
    "AuthnIdSettings",
    "get_settings",
]
