"""Tool registration and lookup."""

import inspect
import logging
import types
from collections.abc import Callable, Iterator
from typing import Any, Union, get_args, get_origin, get_type_hints

from miniagent.errors import DuplicateToolError
from miniagent.tools.base import FunctionTool, Tool, ToolFunction, ToolSpec, spec_of

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry of tools owned by a single agent.

    Tools are keyed by name and kept in registration order.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool.

        Args:
            tool: Tool to register

        Raises:
            DuplicateToolError: If a tool with the same name already exists
        """
        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)
        self._tools[tool.name] = tool
        logger.debug("Registered tool '%s'", tool.name)

    def lookup(self, name: str) -> Tool | None:
        """Get a tool by name, or None if it is not registered."""
        return self._tools.get(name)

    def catalog(self) -> list[ToolSpec]:
        """Build the tool catalog sent to the provider.

        Produced fresh on every call.
        """
        return [spec_of(tool) for tool in self._tools.values()]

    @property
    def names(self) -> list[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(list(self._tools.values()))


def _python_type_to_json_schema(py_type: Any) -> str:
    """Convert Python type hint to JSON Schema type.

    Args:
        py_type: Python type annotation

    Returns:
        JSON Schema type string
    """
    origin = get_origin(py_type)

    # Unwrap Optional[X], Union[X, None] and X | None
    if origin is Union or origin is types.UnionType:
        non_none = [arg for arg in get_args(py_type) if arg is not type(None)]
        if non_none:
            py_type = non_none[0]
            origin = get_origin(py_type)

    # list[str] -> list
    if origin in (list, dict):
        py_type = origin

    type_map = {
        str: "string",
        int: "integer",
        float: "number",
        bool: "boolean",
        list: "array",
        dict: "object",
    }

    return type_map.get(py_type, "string")


def _param_description(fn: ToolFunction, param_name: str) -> str:
    """Find "param_name: description" in the function docstring."""
    if fn.__doc__:
        for line in fn.__doc__.split("\n"):
            line = line.strip()
            if line.startswith(f"{param_name}:"):
                return line[len(param_name) + 1 :].strip()
    return f"Parameter {param_name}"


def tool(
    description: str,
    name: str | None = None,
) -> Callable[[ToolFunction], FunctionTool]:
    """Decorator turning an async function into a FunctionTool.

    Introspects the function signature and docstring to build the
    parameters schema. Parameters without defaults are required.

    Args:
        description: Human-readable description of what the tool does
        name: Tool name (defaults to the function name)

    Returns:
        Decorator function

    Example:
        @tool(description="Look up the weather for a city")
        async def weather(city: str, days: int = 1) -> str:
            '''Fetch a forecast.

            Args:
                city: City name
                days: Number of days to forecast
            '''
            ...
    """

    def decorator(fn: ToolFunction) -> FunctionTool:
        hints = get_type_hints(fn)
        sig = inspect.signature(fn)

        properties: dict[str, Any] = {}
        required: list[str] = []

        for param_name, param in sig.parameters.items():
            json_type = _python_type_to_json_schema(hints.get(param_name, str))
            properties[param_name] = {
                "type": json_type,
                "description": _param_description(fn, param_name),
            }
            if param.default is inspect.Parameter.empty:
                required.append(param_name)

        spec = ToolSpec(
            name=name or fn.__name__,
            description=description,
            parameters_schema={
                "type": "object",
                "properties": properties,
                "required": required,
                "additionalProperties": False,
            },
        )
        return FunctionTool(spec=spec, fn=fn)

    return decorator
