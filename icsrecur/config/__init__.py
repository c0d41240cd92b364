"""Configuration package for icsrecur."""

from .settings import IcsRecurSettings, LoggingSettings, get_settings, reset_settings

__all__ = ["IcsRecurSettings", "LoggingSettings", "get_settings", "reset_settings"]
