"""Tool system for miniagent agents.

A tool is anything with a ``name``, a ``description``, a JSON Schema for its
``parameters_schema`` and an async ``execute(arguments)`` returning a string.
Tools are registered on an agent's :class:`~miniagent.tools.registry.ToolRegistry`
and exposed to the provider as a catalog on every step.

Built-in tools:

- **add_numbers** / **multiply_numbers** - Integer arithmetic
- **get_joke** - Random family-friendly joke from JokeAPI

Usage::

    from miniagent.tools import builtin_tools

    tools = builtin_tools(["add_numbers", "get_joke"])
"""

from miniagent.tools.arithmetic import AddNumbersTool, MultiplyNumbersTool
from miniagent.tools.base import FunctionTool, Tool, ToolSpec, validate_arguments
from miniagent.tools.joke import JokeTool
from miniagent.tools.registry import ToolRegistry, tool

BUILTIN_TOOLS: dict[str, type] = {
    "add_numbers": AddNumbersTool,
    "multiply_numbers": MultiplyNumbersTool,
    "get_joke": JokeTool,
}


def builtin_tools(names: list[str] | None = None) -> list[Tool]:
    """Create fresh instances of built-in tools.

    Args:
        names: Tool names to include (all built-ins if None)

    Returns:
        List of tool instances in the requested order

    Raises:
        KeyError: If a name is not a built-in tool
    """
    if names is None:
        names = list(BUILTIN_TOOLS)
    tools = []
    for name in names:
        if name not in BUILTIN_TOOLS:
            raise KeyError(f"Unknown built-in tool '{name}'")
        tools.append(BUILTIN_TOOLS[name]())
    return tools


__all__ = [
    "BUILTIN_TOOLS",
    "AddNumbersTool",
    "FunctionTool",
    "JokeTool",
    "MultiplyNumbersTool",
    "Tool",
    "ToolRegistry",
    "ToolSpec",
    "builtin_tools",
    "tool",
    "validate_arguments",
]
