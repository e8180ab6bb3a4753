"""Configuration infrastructure package."""

from .settings import AppSettings, ToolSettings, WeatherSettings, get_settings, reload_settings

__all__ = ['AppSettings', 'ToolSettings', 'WeatherSettings', 'get_settings', 'reload_settings']
