"""
Configuration package for the Wiki Nearby service.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    WikiSettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "WikiSettings",
    "settings",
    "get_settings",
    "reload_settings",
]
