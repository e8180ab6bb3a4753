"""
ToolInvoker - validates structured arguments and runs a tool implementation.

The invoker is what the plugin loader hands out for every discovered tool. It
filters arguments to what the implementation accepts, validates them against
the tool's JSON schema and returns the implementation's result as a string.
Errors are raised to the caller; nothing is retried.
"""
from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from .domain.models.tool import InvalidArgument, ToolArgs


class ToolInvoker:
    """Callable wrapper executing one named tool with schema-checked arguments."""

    def __init__(
        self,
        name: str,
        implementation: Callable[..., Any],
        parameters: Optional[Dict[str, Any]] = None,
        description: str = "",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.name = name
        self.description = description
        self.parameters = parameters if isinstance(parameters, dict) else {"type": "object", "properties": {}}
        self._implementation = implementation
        self._logger = logger or logging.getLogger(__name__)
        # SchemaError here means the tool itself is broken, not the caller's arguments
        Draft202012Validator.check_schema(self.parameters)
        self._validator = Draft202012Validator(self.parameters)

        sig = inspect.signature(implementation)
        params = sig.parameters
        self._accepts_var_kw = any(p.kind == inspect.Parameter.VAR_KEYWORD for p in params.values())
        self._param_names = {
            n for n, p in params.items()
            if p.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
        }

        self.__name__ = f"plugin_{name}"
        self.__doc__ = f"Invoker for tool '{name}' with JSON schema validation."

    @classmethod
    def from_schema(cls, schema: Dict[str, Any], implementation: Callable[..., Any], logger: Optional[logging.Logger] = None) -> "ToolInvoker":
        """Build an invoker from an OpenAI-style ``{"type": "function", "function": {...}}`` definition."""
        func = schema.get("function", {})
        return cls(
            name=func.get("name", ""),
            implementation=implementation,
            parameters=func.get("parameters"),
            description=func.get("description", ""),
            logger=logger,
        )

    def to_api_format(self) -> Dict[str, Any]:
        """Function-tool definition in the form hosts register."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    def _prepare(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        if self._accepts_var_kw:
            filtered = dict(arguments)
        else:
            filtered = {k: v for k, v in arguments.items() if k in self._param_names}
            dropped = [k for k in arguments.keys() if k not in self._param_names]
            if dropped:
                self._logger.debug(f"Tool '{self.name}': dropping unexpected arguments: {dropped}")

        # None means "not provided"; keeps optional string fields from failing on null
        return {k: v for k, v in filtered.items() if v is not None}

    def validate(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the cleaned arguments or raise InvalidArgument."""
        cleaned = self._prepare(arguments)
        error = best_match(self._validator.iter_errors(cleaned))
        if error is not None:
            where = ".".join(str(p) for p in error.path) or "arguments"
            raise InvalidArgument(f"Arguments for {self.name} failed schema validation at '{where}': {error.message}")
        return cleaned

    def invoke(self, args: Union[ToolArgs, Mapping[str, Any], None] = None) -> str:
        """Validate ``args`` and run the tool, returning its string result."""
        if args is None:
            arguments: Mapping[str, Any] = {}
        elif isinstance(args, ToolArgs):
            arguments = args.to_arguments()
        elif isinstance(args, Mapping):
            arguments = args
        else:
            raise InvalidArgument(f"Arguments for {self.name} must be an object, got {type(args).__name__}")

        cleaned = self.validate(arguments)
        self._logger.debug(f"Invoking tool '{self.name}' with {cleaned}")
        try:
            result = self._implementation(**cleaned)
        except TypeError as te:
            self._logger.error(f"Tool '{self.name}' invocation failed with TypeError: {te}")
            raise
        return result if isinstance(result, str) else str(result)

    def __call__(self, **kwargs: Any) -> str:
        return self.invoke(kwargs)

    def __repr__(self) -> str:
        return f"ToolInvoker(name={self.name!r})"
