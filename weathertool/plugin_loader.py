"""
Tool discovery.

A tool plugin is any module defining ``TOOL_SCHEMA``, an OpenAI-style function
definition, plus an implementation: ``TOOL_IMPLEMENTATION``, a function named
after the tool, or ``execute``. ``TOOL_VERSION`` and ``TOOL_AUTHOR`` are
optional.

Built-in plugins live in ``weathertool.plugins``. Extra directories are only
searched when listed in ``WEATHERTOOL_TOOLS_DIR`` or passed explicitly.
Plugins that fail the contract are logged and skipped; each accepted one is
wrapped in a ToolInvoker.
"""
from __future__ import annotations

import hashlib
import importlib
import importlib.util
import logging
import os
import pkgutil
import sys
import threading
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Dict, Iterable, Iterator, List, Optional

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError, best_match

from . import plugins as _builtin_plugins
from .domain.models.tool import ToolNotFoundError
from .infrastructure.config.settings import ToolSettings
from .tool_executor import ToolInvoker

logger = logging.getLogger(__name__)

# Shape of TOOL_SCHEMA; the "parameters" object is checked separately against the metaschema
_DEFINITION_VALIDATOR = Draft202012Validator({
    "type": "object",
    "required": ["type", "function"],
    "properties": {
        "type": {"const": "function"},
        "function": {
            "type": "object",
            "required": ["name", "description", "parameters"],
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "description": {"type": "string", "minLength": 1},
                "parameters": {"type": ["object", "boolean"]},
            },
        },
    },
})


class PluginLoadError(Exception):
    pass


@dataclass(frozen=True)
class LoadedTool:
    invoker: ToolInvoker
    source: str
    version: Optional[str] = None
    author: Optional[str] = None

    @property
    def name(self) -> str:
        return self.invoker.name


def build_tool(module: ModuleType, source: str, log: Optional[logging.Logger] = None) -> LoadedTool:
    """Turn a plugin module into a LoadedTool or raise PluginLoadError."""
    definition = getattr(module, "TOOL_SCHEMA", None)
    if not isinstance(definition, dict):
        raise PluginLoadError("Missing or invalid TOOL_SCHEMA (must be a dict)")
    error = best_match(_DEFINITION_VALIDATOR.iter_errors(definition))
    if error is not None:
        raise PluginLoadError(f"Tool definition failed validation: {error.message}")

    name = definition["function"]["name"]
    impl = next(
        (c for c in (getattr(module, attr, None) for attr in ("TOOL_IMPLEMENTATION", name, "execute")) if callable(c)),
        None,
    )
    if impl is None:
        raise PluginLoadError("No callable implementation found (TOOL_IMPLEMENTATION, function name, or execute)")

    try:
        invoker = ToolInvoker.from_schema(definition, impl, logger=log)
    except SchemaError as e:
        raise PluginLoadError(f"Tool '{name}' has an invalid parameters schema: {e.message}") from e
    return LoadedTool(
        invoker=invoker,
        source=source,
        version=getattr(module, "TOOL_VERSION", None),
        author=getattr(module, "TOOL_AUTHOR", None),
    )


def _builtin_modules() -> Iterator[tuple]:
    prefix = _builtin_plugins.__name__ + "."
    for info in sorted(pkgutil.iter_modules(_builtin_plugins.__path__), key=lambda i: i.name):
        if info.name.startswith("_"):
            continue
        yield prefix + info.name, None


def _directory_modules(directory: str) -> Iterator[tuple]:
    if not os.path.isdir(directory):
        logger.debug(f"Tool directory {directory} does not exist; skipping")
        return
    for entry in sorted(os.listdir(directory)):
        if entry.startswith("_"):
            continue
        path = os.path.join(directory, entry)
        if os.path.isdir(path) and os.path.isfile(os.path.join(path, "__init__.py")):
            yield None, os.path.join(path, "__init__.py")
        elif entry.endswith(".py") and os.path.isfile(path):
            yield None, path


def _import_file(path: str) -> ModuleType:
    digest = hashlib.sha1(os.path.abspath(path).encode("utf-8")).hexdigest()[:12]
    module_name = f"weathertool_ext_{digest}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise PluginLoadError(f"Cannot create import spec for {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(module_name, None)
        raise
    return module


class ToolCatalog:
    """Thread-safe name -> ToolInvoker mapping built from plugin modules."""

    def __init__(
        self,
        directories: Optional[Iterable[str]] = None,
        include_builtin: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._directories = list(directories) if directories is not None else None
        self._include_builtin = include_builtin
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()
        self._tools: Dict[str, LoadedTool] = {}

    def _search_directories(self, extra: Optional[Iterable[str]]) -> List[str]:
        configured = self._directories if self._directories is not None else ToolSettings().plugin_paths
        out: List[str] = []
        for d in list(configured) + list(extra or []):
            ap = os.path.abspath(d)
            if ap not in out:
                out.append(ap)
        return out

    def load(self, extra_directories: Optional[Iterable[str]] = None) -> Dict[str, ToolInvoker]:
        """(Re)discover plugins, replacing whatever was loaded before."""
        sources: List[tuple] = []
        if self._include_builtin:
            sources.extend(_builtin_modules())
        for directory in self._search_directories(extra_directories):
            sources.extend(_directory_modules(directory))

        found: Dict[str, LoadedTool] = {}
        for module_name, path in sources:
            source = path or module_name
            try:
                if module_name:
                    module = importlib.import_module(module_name)
                else:
                    module = _import_file(path)
                tool = build_tool(module, source, self._logger)
            except Exception as e:
                self._logger.error(f"Failed to load plugin from {source}: {e}")
                continue
            if tool.name in found:
                self._logger.warning(f"Duplicate tool name '{tool.name}' from {source}; keeping {found[tool.name].source}")
                continue
            found[tool.name] = tool
            self._logger.info(f"Loaded tool '{tool.name}' from {source}")

        with self._lock:
            self._tools = found
        return self.invokers()

    def get(self, name: str) -> ToolInvoker:
        with self._lock:
            tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return tool.invoker

    def tools(self) -> List[LoadedTool]:
        with self._lock:
            return list(self._tools.values())

    def invokers(self) -> Dict[str, ToolInvoker]:
        with self._lock:
            return {name: tool.invoker for name, tool in self._tools.items()}

    def schemas(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [tool.invoker.to_api_format() for tool in self._tools.values()]


_default_catalog: Optional[ToolCatalog] = None
_default_lock = threading.Lock()


def get_catalog() -> ToolCatalog:
    """Process-wide catalog, loaded on first use."""
    global _default_catalog
    with _default_lock:
        if _default_catalog is None:
            catalog = ToolCatalog()
            catalog.load()
            _default_catalog = catalog
        return _default_catalog


def reload_tools(extra_directories: Optional[Iterable[str]] = None) -> Dict[str, ToolInvoker]:
    """Re-run discovery on the process-wide catalog."""
    return get_catalog().load(extra_directories)
