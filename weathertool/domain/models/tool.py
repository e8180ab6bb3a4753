"""
Argument records and errors shared by every tool.
"""

from __future__ import annotations
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Mapping, get_type_hints


class InvalidArgument(ValueError):
    """Raised when tool arguments are missing or fail schema validation."""


class ToolNotFoundError(KeyError):
    """Raised when a tool name is not registered."""

    def __str__(self) -> str:
        return f"Tool '{self.args[0]}' is not loaded" if self.args else "Tool is not loaded"


_JSON_TYPES: Dict[Any, str] = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    list: "array",
    dict: "object",
}


def arg_field(description: str, default: Any = MISSING, **schema: Any) -> Any:
    """Declare a ToolArgs field with a schema description and extra JSON schema keywords."""
    metadata = {"description": description, "schema": schema}
    if default is MISSING:
        return field(metadata=metadata)
    return field(default=default, metadata=metadata)


@dataclass
class ToolArgs:
    """Base record for tool arguments.

    Subclasses declare fields with ``arg_field`` so the JSON schema handed to the
    host is derived from the record itself.
    """

    additional_properties: ClassVar[bool] = True

    @classmethod
    def json_schema(cls) -> Dict[str, Any]:
        """Render the object schema for this argument record."""
        hints = get_type_hints(cls)
        properties: Dict[str, Any] = {}
        required: List[str] = []
        for f in fields(cls):
            prop: Dict[str, Any] = {}
            json_type = _JSON_TYPES.get(hints.get(f.name))
            if json_type:
                prop["type"] = json_type
            description = f.metadata.get("description")
            if description:
                prop["description"] = description
            prop.update(f.metadata.get("schema") or {})
            if f.default is not MISSING:
                prop["default"] = f.default
            elif f.default_factory is MISSING:  # type: ignore[misc]
                required.append(f.name)
            properties[f.name] = prop
        schema: Dict[str, Any] = {"type": "object", "properties": properties, "required": required}
        if not cls.additional_properties:
            schema["additionalProperties"] = False
        return schema

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> "ToolArgs":
        """Build the record from a raw argument mapping, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        missing = [
            f.name for f in fields(cls)
            if f.name not in arguments and f.default is MISSING and f.default_factory is MISSING  # type: ignore[misc]
        ]
        if missing:
            raise InvalidArgument(f"missing required argument(s): {', '.join(missing)}")
        return cls(**{k: v for k, v in arguments.items() if k in names})

    def to_arguments(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class WeatherArgs(ToolArgs):
    """Arguments for the weather tool."""
    city: str = arg_field("The city to get weather for.", minLength=1)

