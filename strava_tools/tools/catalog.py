"""Tool specifications.

A tool is a name, a description, a pydantic input model and an async handler
that takes a validated instance of that model.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from strava_tools.tools.results import ToolResult


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating raw tool arguments. Never raised, always returned."""

    success: bool
    data: BaseModel | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)

    def error_summary(self) -> str:
        parts = []
        for error in self.errors:
            location = ".".join(str(item) for item in error.get("loc", ())) or "input"
            parts.append(f"{location}: {error.get('msg', 'invalid value')}")
        return "; ".join(parts)


@dataclass(frozen=True)
class ToolSpec:
    """Specification for a callable tool."""

    name: str
    description: str
    input_model: type[BaseModel]
    execute: Callable[..., Awaitable[ToolResult]]

    def safe_parse(self, arguments: Any) -> ValidationResult:
        """Validate raw arguments against the input model without raising."""
        try:
            data = self.input_model.model_validate(arguments)
        except ValidationError as e:
            return ValidationResult(
                success=False,
                errors=e.errors(include_url=False, include_context=False),
            )
        return ValidationResult(success=True, data=data)

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the input, using the external (camelCase) field names."""
        return self.input_model.model_json_schema(by_alias=True)

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
