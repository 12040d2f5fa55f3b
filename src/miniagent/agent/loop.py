"""ReAct agent loop implementation."""

import asyncio
import logging

from miniagent.agent.state import AgentState, ConversationState
from miniagent.config.schema import AgentConfig
from miniagent.errors import (
    MaxStepsExceededError,
    ProviderError,
    ToolError,
    UnknownToolError,
)
from miniagent.llm.client import (
    FinalAnswer,
    Message,
    Provider,
    ProviderResponse,
    ToolCallRequest,
)
from miniagent.tools.base import Tool, validate_arguments
from miniagent.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class Agent:
    """ReAct agent with tool calling capabilities.

    The conversation persists across runs on the same instance; the step
    counter and run state are reset for every run.
    """

    def __init__(
        self,
        provider: Provider,
        model: str = "",
        tools: list[Tool] | None = None,
        config: AgentConfig | None = None,
    ):
        """Initialize the agent.

        Args:
            provider: LLM provider used for every step
            model: Model identifier passed to the provider
            tools: Tools to register up front
            config: Loop configuration; ``model`` overrides ``config.model`` when given
        """
        self.provider = provider
        self.config = config or AgentConfig()
        if model:
            self.config = self.config.model_copy(update={"model": model})

        self.tools = ToolRegistry()
        self.conversation = ConversationState(self.config.system_prompt)
        self.state = AgentState()
        self._running = False

        for tool in tools or []:
            self.tools.register(tool)

    @property
    def model(self) -> str:
        return self.config.model

    @property
    def history(self) -> tuple[Message, ...]:
        """Conversation so far, system message first."""
        return self.conversation.messages

    def _ensure_idle(self) -> None:
        if self._running:
            raise RuntimeError("Agent cannot be reconfigured while a run is in progress")

    def with_system_prompt(self, prompt: str) -> "Agent":
        """Replace the system prompt. Only allowed before the first run."""
        self._ensure_idle()
        if len(self.conversation) > 1:
            raise RuntimeError("System prompt can only be changed before the first run")
        self.config = self.config.model_copy(update={"system_prompt": prompt})
        self.conversation = ConversationState(prompt)
        return self

    def with_max_steps(self, max_steps: int) -> "Agent":
        """Set the step budget for each run."""
        self._ensure_idle()
        if max_steps < 1:
            raise ValueError(f"max_steps must be a positive integer, got {max_steps}")
        self.config = self.config.model_copy(update={"max_steps": max_steps})
        return self

    def with_argument_validation(self, enabled: bool = True) -> "Agent":
        """Validate tool arguments against each tool's schema before execution."""
        self._ensure_idle()
        self.config = self.config.model_copy(update={"validate_arguments": enabled})
        return self

    def add_tool(self, tool: Tool) -> None:
        """Register a tool.

        Raises:
            DuplicateToolError: If a tool with the same name is registered
        """
        self._ensure_idle()
        self.tools.register(tool)

    def with_tool(self, tool: Tool) -> "Agent":
        """Register a tool and return the agent for chaining."""
        self.add_tool(tool)
        return self

    async def run(self, user_message: str) -> str:
        """Run the agent on a user message.

        Args:
            user_message: User's input message

        Returns:
            Agent's final answer

        Raises:
            ProviderError: If the provider fails on any step
            UnknownToolError: If the provider requests an unregistered tool
            MaxStepsExceededError: If no final answer arrives within max_steps
        """
        if self._running:
            raise RuntimeError("Agent is already running")

        config = self.config
        self._running = True
        self.state = AgentState()
        state = self.state

        try:
            self.conversation.add_user_message(user_message)
            return await self._loop(config, state)
        except asyncio.CancelledError as e:
            logger.warning("Run cancelled at step %d", state.step)
            # Every tool call in the history needs a matching result
            if state.pending_call is not None:
                self.conversation.add_tool_result(
                    state.pending_call, "Error: tool execution cancelled", is_error=True
                )
            state.fail(e)
            raise
        except Exception as e:
            if not state.is_terminal:
                state.fail(e)
            raise
        finally:
            self._running = False

    async def _loop(self, config: AgentConfig, state: AgentState) -> str:
        while state.step < config.max_steps:
            logger.debug("Step %d/%d", state.step + 1, config.max_steps)

            response = await self._request(config, state)

            if isinstance(response, FinalAnswer):
                self.conversation.add_assistant_message(response.text)
                state.complete(response.text)
                logger.info("Run completed after %d tool step(s)", state.step)
                return response.text

            tool = self.tools.lookup(response.name)
            if tool is None:
                error = UnknownToolError(response.name)
                state.fail(error)
                logger.error("Provider requested unknown tool '%s'", response.name)
                raise error

            self.conversation.add_tool_call(response)
            state.await_tool(response)

            result, is_error = await self._execute_tool_call(tool, response, config)
            self.conversation.add_tool_result(response, result, is_error=is_error)
            state.tool_finished()

        error = MaxStepsExceededError(config.max_steps)
        state.fail(error)
        logger.warning("Max steps reached (%d) without a final answer", config.max_steps)
        raise error

    async def _request(self, config: AgentConfig, state: AgentState) -> ProviderResponse:
        """Ask the provider for the next step."""
        provider_name = getattr(self.provider, "name", type(self.provider).__name__)
        try:
            response = await self.provider.complete(
                list(self.conversation.messages),
                self.tools.catalog(),
                config.model,
            )
        except ProviderError as e:
            error = ProviderError(f"[{provider_name}] step {state.step}: {e}")
            state.fail(error)
            raise error from e

        if not isinstance(response, (FinalAnswer, ToolCallRequest)):
            error = ProviderError(
                f"[{provider_name}] step {state.step}: "
                f"unexpected response type {type(response).__name__}"
            )
            state.fail(error)
            raise error

        return response

    async def _execute_tool_call(
        self, tool: Tool, call: ToolCallRequest, config: AgentConfig
    ) -> tuple[str, bool]:
        """Execute a tool call, converting tool failures into result text.

        Args:
            tool: Registered tool
            call: The tool call to execute
            config: Loop configuration for this run

        Returns:
            Tuple of (result text, whether the tool failed)
        """
        logger.info("Executing tool: %s", call.name)
        try:
            if config.validate_arguments:
                validate_arguments(tool.parameters_schema, call.arguments)
            return await tool.execute(call.arguments), False
        except ToolError as e:
            logger.warning("Tool '%s' failed: %s", call.name, e)
            return f"Error: {e}", True
        except Exception as e:
            logger.warning("Tool '%s' raised %s: %s", call.name, type(e).__name__, e)
            return f"Error executing tool '{call.name}': {e}", True
