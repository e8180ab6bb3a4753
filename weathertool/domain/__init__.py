"""Domain layer - argument records and errors, no third-party dependencies."""

from .models.tool import InvalidArgument, ToolNotFoundError, ToolArgs, WeatherArgs

__all__ = ["InvalidArgument", "ToolNotFoundError", "ToolArgs", "WeatherArgs"]
