"""
Configuration package for bootwind

Provides application settings via environment variables using pydantic-settings.
"""

from .settings import appsettings, AppSettings, ColorOverride

__all__ = ["appsettings", "AppSettings", "ColorOverride"]
