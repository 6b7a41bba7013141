"""
Configuration Management Package

Provides Pydantic-based configuration models and management for hiddenprefs.
"""

from hiddenprefs.core.config.models import AppConfig, ViewerConfig, FilterConfig, LoggingConfig
from hiddenprefs.core.config.manager import ConfigManager

__all__ = [
    "AppConfig",
    "ViewerConfig",
    "FilterConfig",
    "LoggingConfig",
    "ConfigManager",
]
