"""Declarative tool definitions and results shared by the catalog, registry and server.

An `EndpointDefinition` describes one ClickSend endpoint: the HTTP method, a URL
template relative to the API base URL, and the ordered parameters the tool accepts.
Parameters whose name appears as a `{placeholder}` in the template are URL parameters;
all other declared parameters travel in the JSON request body.
"""
from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

MUTATING_METHODS = frozenset({"POST", "PUT", "DELETE"})


class ParamKind(str, Enum):
    STRING = "string"
    ARRAY = "array"

    def accepts(self, value: Any) -> bool:
        if self is ParamKind.ARRAY:
            return isinstance(value, list)
        return isinstance(value, str)


@dataclass(frozen=True)
class ToolParameter:
    name: str
    description: str
    required: bool = False
    kind: ParamKind = ParamKind.STRING

    def json_schema(self) -> Dict[str, Any]:
        return {"type": self.kind.value, "description": self.description}


@dataclass(frozen=True)
class EndpointDefinition:
    name: str
    title: str
    description: str
    method: str
    path: str
    parameters: Tuple[ToolParameter, ...] = ()

    def __post_init__(self):
        method = self.method.upper()
        object.__setattr__(self, "method", method)
        declared = {p.name for p in self.parameters}
        unknown = [n for n in self.url_fields if n not in declared]
        if unknown:
            raise ValueError(f"{self.name}: template placeholders {unknown} have no declared parameter")

    @property
    def url_fields(self) -> Tuple[str, ...]:
        """Placeholder names in template order."""
        return tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        )

    @property
    def body_fields(self) -> Tuple[str, ...]:
        url_fields = set(self.url_fields)
        return tuple(p.name for p in self.parameters if p.name not in url_fields)

    @property
    def has_body(self) -> bool:
        return self.method in MUTATING_METHODS and bool(self.body_fields)

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.parameters if p.required)

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema advertised to MCP clients in tools/list."""
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
        }
        required: List[str] = list(self.required_fields)
        if required:
            schema["required"] = required
        return schema


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=message, is_error=True)


class ArgumentError(ValueError):
    """Raised while validating invocation arguments; converted into an error ToolResult."""


class ToolExecutionError(Exception):
    """Raised by the MCP call handler so the SDK reports the result with isError set."""


@dataclass
class InvocationArguments:
    """Validated arguments of one invocation, split into URL values and body fields."""

    url_values: Dict[str, str] = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)
