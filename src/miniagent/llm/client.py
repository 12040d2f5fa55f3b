"""Provider protocol and conversation data types."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, Union

if TYPE_CHECKING:
    from miniagent.tools.base import ToolSpec


class Role(str, Enum):
    """Author of a conversation message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


def new_call_id() -> str:
    """Generate a tool call id for providers that do not supply one."""
    return f"call_{uuid.uuid4().hex[:24]}"


@dataclass(frozen=True)
class ToolCallRequest:
    """A tool call requested by the LLM."""

    name: str
    arguments: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=new_call_id)


@dataclass(frozen=True)
class FinalAnswer:
    """A final textual answer from the LLM."""

    text: str


# Exactly one of the two per provider turn
ProviderResponse = Union[FinalAnswer, ToolCallRequest]


@dataclass(frozen=True)
class Message:
    """A message in the conversation."""

    role: Role
    content: str
    tool_call: ToolCallRequest | None = None  # Tool-call intent on assistant messages
    tool_call_id: str | None = None  # For tool result messages
    name: str | None = None  # Tool name for tool result messages
    is_error: bool = False

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str, tool_call: ToolCallRequest | None = None) -> "Message":
        return cls(role=Role.ASSISTANT, content=content, tool_call=tool_call)

    @classmethod
    def tool_result(
        cls, tool_call_id: str, tool_name: str, content: str, is_error: bool = False
    ) -> "Message":
        return cls(
            role=Role.TOOL,
            content=content,
            tool_call_id=tool_call_id,
            name=tool_name,
            is_error=is_error,
        )


class Provider(Protocol):
    """Protocol for LLM provider implementations."""

    name: str

    async def complete(
        self,
        messages: list[Message],
        tools: list["ToolSpec"],
        model: str,
    ) -> ProviderResponse:
        """Request the next step from the LLM.

        Args:
            messages: Full conversation history
            tools: Tool catalog available for this step
            model: Model identifier; empty string selects the provider default

        Returns:
            FinalAnswer or a single ToolCallRequest

        Raises:
            ProviderError: On transport, authentication or parsing failure
        """
        ...

    async def close(self) -> None:
        """Release the underlying HTTP client."""
        ...
