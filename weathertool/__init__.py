"""
weathertool - a pluggable tool-invocation contract with a canned weather tool.
"""

__version__ = "1.0.0"
__author__ = "weathertool Team"

__all__ = [
    "ToolInvoker",
    "InvalidArgument",
    "ToolNotFoundError",
    "WeatherArgs",
    "get_weather",
    "invoke_tool",
]

# Lazy attribute access so importing the package does not trigger plugin discovery.
def __getattr__(name: str):  # pragma: no cover - simple lazy loader
    if name == "ToolInvoker":
        from .tool_executor import ToolInvoker as _I
        return _I
    if name in {"InvalidArgument", "ToolNotFoundError", "WeatherArgs"}:
        from .domain.models import tool as _tool
        return getattr(_tool, name)
    if name in {"get_weather", "invoke_tool"}:
        from . import tools as _tools
        return getattr(_tools, name)
    raise AttributeError(f"module 'weathertool' has no attribute {name!r}")
