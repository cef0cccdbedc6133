"""
Configuration package for the LexiBridge translation service.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    EngineSettings,
    DatabaseSettings,
    FallbackSettings,
    SecuritySettings,
    settings,
    get_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "EngineSettings",
    "DatabaseSettings",
    "FallbackSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
]
