"""
Configuration settings - Infrastructure component for managing application configuration.
Uses Pydantic for validation and environment variable loading.
"""

from __future__ import annotations
import os
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WeatherSettings(BaseSettings):
    """Placeholder values reported by the weather tool."""

    model_config = SettingsConfigDict(env_prefix='WEATHERTOOL_WEATHER_', env_file='.env', extra='ignore')

    condition: str = 'Sunny'
    temperature_c: int = 25

    @field_validator('condition')
    @classmethod
    def validate_condition(cls, v: str) -> str:
        """Fall back to the default when the configured condition is blank."""
        return v.strip() or 'Sunny'


class ToolSettings(BaseSettings):
    """Tool system configuration."""

    model_config = SettingsConfigDict(env_prefix='WEATHERTOOL_', env_file='.env', extra='ignore')

    # os.pathsep-separated extra plugin directories
    tools_dir: str = ''

    @property
    def plugin_paths(self) -> List[str]:
        if not self.tools_dir:
            return []
        return [path.strip() for path in self.tools_dir.split(os.pathsep) if path.strip()]


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(env_prefix='WEATHERTOOL_', env_file='.env', extra='ignore')

    weather: WeatherSettings = Field(default_factory=WeatherSettings)
    tools: ToolSettings = Field(default_factory=ToolSettings)

    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            return 'INFO'
        return v.upper()

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for serialization."""
        return {
            'weather': self.weather.model_dump(),
            'tools': self.tools.model_dump(),
            'log_level': self.log_level,
        }


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Reload settings from environment (for testing)."""
    global _settings
    _settings = AppSettings()
    return _settings
