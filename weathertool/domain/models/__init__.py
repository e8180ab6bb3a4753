"""Domain models package."""

from .tool import (
    InvalidArgument,
    ToolNotFoundError,
    ToolArgs,
    WeatherArgs,
    arg_field,
)

__all__ = [
    "InvalidArgument",
    "ToolNotFoundError",
    "ToolArgs",
    "WeatherArgs",
    "arg_field",
]
