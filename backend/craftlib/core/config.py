"""
Configuration settings for Craft Library

The settings implementation lives in settings.py using pydantic-settings.

Usage:
    from craftlib.core.config import settings
    # or
    from craftlib.core.settings import get_settings
    settings = get_settings()
"""
from craftlib.core.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
