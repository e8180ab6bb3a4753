"""
Module-level entry points over the process-wide tool catalog.
"""

from typing import Any, Dict, List, Optional

from .plugin_loader import get_catalog, reload_tools
from .tool_executor import ToolInvoker

__all__ = [
    "tool_schemas",
    "tool_functions",
    "reload_tools",
    "invoke_tool",
    "get_weather",
]


def tool_schemas() -> List[Dict[str, Any]]:
    """Function-tool definitions for every loaded tool, read at call time."""
    return get_catalog().schemas()


def tool_functions() -> Dict[str, ToolInvoker]:
    return get_catalog().invokers()


def invoke_tool(name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
    """Invoke a loaded tool by name; raises ToolNotFoundError or InvalidArgument."""
    return get_catalog().get(name).invoke(arguments or {})


def get_weather(city: str) -> str:
    return invoke_tool("get_weather", {"city": city})
