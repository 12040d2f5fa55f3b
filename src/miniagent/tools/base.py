"""Base types for the tool system."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import jsonschema

from miniagent.errors import ToolError


@dataclass(frozen=True)
class ToolSpec:
    """Static descriptor of a tool, surfaced to the provider for selection."""

    name: str
    description: str
    parameters_schema: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}, "additionalProperties": False}
    )

    def to_catalog_entry(self) -> dict[str, Any]:
        """Serialize to the provider-neutral catalog shape.

        Returns:
            Dictionary with name, description and parameters
        """
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters_schema,
        }

    def to_openai_format(self) -> dict[str, Any]:
        """Convert to OpenAI function calling format.

        Returns:
            Dictionary matching OpenAI's function schema format
        """
        return {"type": "function", "function": self.to_catalog_entry()}


@runtime_checkable
class Tool(Protocol):
    """Protocol for anything the agent can call."""

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def parameters_schema(self) -> dict[str, Any]: ...

    async def execute(self, arguments: dict[str, Any]) -> str:
        """Run the tool.

        Must accept untrusted, schema-nonconforming input.

        Raises:
            ToolError: If execution fails
        """
        ...


def spec_of(tool: Tool) -> ToolSpec:
    """Build the ToolSpec describing a tool."""
    return ToolSpec(
        name=tool.name,
        description=tool.description,
        parameters_schema=tool.parameters_schema,
    )


def validate_arguments(schema: dict[str, Any], arguments: Any) -> None:
    """Validate tool arguments against a JSON Schema.

    Args:
        schema: JSON Schema of the tool parameters
        arguments: Arguments supplied by the provider

    Raises:
        ToolError: If the arguments do not conform to the schema
    """
    try:
        jsonschema.validate(instance=arguments, schema=schema)
    except jsonschema.ValidationError as e:
        raise ToolError(f"Invalid arguments: {e.message}") from e


# Tool function signature: async function that returns a string result
ToolFunction = Callable[..., Awaitable[str]]


@dataclass
class FunctionTool:
    """A tool backed by an async function taking keyword arguments."""

    spec: ToolSpec
    fn: ToolFunction

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def description(self) -> str:
        return self.spec.description

    @property
    def parameters_schema(self) -> dict[str, Any]:
        return self.spec.parameters_schema

    async def execute(self, arguments: dict[str, Any]) -> str:
        """Execute the function with given arguments.

        Args:
            arguments: Tool arguments

        Returns:
            Tool execution result as string
        """
        if not isinstance(arguments, dict):
            raise ToolError(f"Arguments for '{self.name}' must be an object")
        try:
            return await self.fn(**arguments)
        except TypeError as e:
            raise ToolError(f"Invalid arguments for tool '{self.name}': {e}") from e
