"""Conversation history and run state for the agent loop."""

from collections.abc import Iterator
from enum import Enum

from miniagent.errors import AgentError
from miniagent.llm.client import Message, ToolCallRequest


class ConversationState:
    """Append-only, ordered message history."""

    def __init__(self, system_prompt: str):
        """Initialize the conversation.

        Args:
            system_prompt: System message for the agent
        """
        self._messages: list[Message] = [Message.system(system_prompt)]

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the history; appended messages never change."""
        return tuple(self._messages)

    def append(self, message: Message) -> None:
        self._messages.append(message)

    def add_user_message(self, content: str) -> None:
        """Add a user message to the conversation."""
        self.append(Message.user(content))

    def add_assistant_message(self, content: str) -> None:
        """Add a final assistant answer to the conversation."""
        self.append(Message.assistant(content))

    def add_tool_call(self, call: ToolCallRequest) -> None:
        """Record the assistant's intent to call a tool."""
        self.append(Message.assistant("", tool_call=call))

    def add_tool_result(self, call: ToolCallRequest, result: str, is_error: bool = False) -> None:
        """Add a tool execution result to the conversation.

        Args:
            call: The tool call that produced the result
            result: Tool output or error text
            is_error: Whether the tool failed
        """
        self.append(Message.tool_result(call.id, call.name, result, is_error=is_error))

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))


class AgentStatus(str, Enum):
    """Phase of an agent run."""

    RUNNING = "running"
    AWAITING_TOOL_RESULT = "awaiting_tool_result"
    COMPLETED = "completed"
    FAILED = "failed"


class AgentState:
    """State machine for a single agent run.

    RUNNING(step) -> AWAITING_TOOL_RESULT -> RUNNING(step + 1) ... ending in
    COMPLETED(answer) or FAILED(error).
    """

    def __init__(self) -> None:
        self.status = AgentStatus.RUNNING
        self.step = 0
        self.pending_call: ToolCallRequest | None = None
        self.answer: str | None = None
        self.error: BaseException | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (AgentStatus.COMPLETED, AgentStatus.FAILED)

    def await_tool(self, call: ToolCallRequest) -> None:
        if self.status is not AgentStatus.RUNNING:
            raise AgentError(f"Cannot dispatch a tool call while {self.status.value}")
        self.status = AgentStatus.AWAITING_TOOL_RESULT
        self.pending_call = call

    def tool_finished(self) -> None:
        if self.status is not AgentStatus.AWAITING_TOOL_RESULT:
            raise AgentError(f"No tool call in flight while {self.status.value}")
        self.status = AgentStatus.RUNNING
        self.pending_call = None
        self.step += 1

    def complete(self, answer: str) -> None:
        self.status = AgentStatus.COMPLETED
        self.answer = answer

    def fail(self, error: BaseException) -> None:
        self.status = AgentStatus.FAILED
        self.error = error

    def __repr__(self) -> str:
        return f"AgentState(status={self.status.value}, step={self.step})"
