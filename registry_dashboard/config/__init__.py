"""Configuration package for runtime settings and startup validation."""

from .settings import DashboardSettings, SettingsLoadError, config_load_settings

__all__ = ["DashboardSettings", "SettingsLoadError", "config_load_settings"]
