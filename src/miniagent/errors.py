"""Error taxonomy for the agent loop.

Only :class:`ToolError` is recoverable: the agent turns it into a tool
result message so the model can react to it. Every other error ends the
current run and propagates to the caller.
"""


class AgentError(Exception):
    """Base class for all agent errors."""


class ProviderError(AgentError):
    """Transport, authentication or response-parsing failure at the provider boundary."""


class ToolError(AgentError):
    """A tool failed to execute."""


class UnknownToolError(AgentError):
    """The provider requested a tool that is not registered."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Tool not found: {tool_name}")


class DuplicateToolError(AgentError):
    """A tool with the same name is already registered."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Tool '{tool_name}' already registered")


class MaxStepsExceededError(AgentError):
    """The loop used up its step budget without a final answer."""

    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"Max steps reached ({max_steps}) without a final answer")
