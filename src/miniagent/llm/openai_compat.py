"""Base provider for OpenAI-compatible chat completion APIs."""

import json
import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from miniagent.errors import ProviderError
from miniagent.llm.client import FinalAnswer, Message, ProviderResponse, Role, ToolCallRequest
from miniagent.tools.base import ToolSpec

logger = logging.getLogger(__name__)


class OpenAICompatibleProvider:
    """Base provider for any OpenAI-compatible ``/v1/chat/completions`` endpoint.

    OpenAI, OpenRouter and Ollama all speak the same request/response shape.
    This base class holds the shared conversion logic so that subclasses only
    supply endpoint defaults and headers.
    """

    name = "OpenAI-compatible"

    def __init__(
        self,
        model: str,
        base_url: str,
        api_key: str = "none",
        timeout: int = 120,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        default_headers: dict[str, str] | None = None,
        max_retries: int = 0,
    ) -> None:
        """Initialise the provider.

        Args:
            model: Default model, used when a call passes an empty model.
            base_url: OpenAI-compatible endpoint (must include ``/v1``).
            api_key: API key (some backends ignore this but the SDK requires one).
            timeout: Request timeout in seconds.
            temperature: Sampling temperature.
            max_tokens: Maximum tokens to generate.
            default_headers: Extra headers sent with every request.
            max_retries: SDK-level retries on transient failures.
        """
        self.model = model
        self.base_url = base_url
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = AsyncOpenAI(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            max_retries=max_retries,
            default_headers=default_headers,
        )

    def _convert_messages(self, messages: list[Message]) -> list[dict[str, Any]]:
        """Convert internal Message format to OpenAI format."""
        openai_messages: list[dict[str, Any]] = []

        for msg in messages:
            message_dict: dict[str, Any] = {
                "role": msg.role.value,
                "content": msg.content,
            }

            if msg.tool_call:
                message_dict["tool_calls"] = [
                    {
                        "id": msg.tool_call.id,
                        "type": "function",
                        "function": {
                            "name": msg.tool_call.name,
                            "arguments": json.dumps(msg.tool_call.arguments),
                        },
                    }
                ]

            if msg.role is Role.TOOL:
                message_dict["tool_call_id"] = msg.tool_call_id
                message_dict["name"] = msg.name

            openai_messages.append(message_dict)

        return openai_messages

    def _convert_tools(self, tools: list[ToolSpec]) -> list[dict[str, Any]]:
        return [spec.to_openai_format() for spec in tools]

    def _parse_tool_call(self, tool_calls: Any) -> ToolCallRequest | None:
        """Parse the first tool call from an OpenAI-compatible response."""
        if not tool_calls:
            return None

        if len(tool_calls) > 1:
            logger.warning(
                "%s returned %d tool calls; only the first is executed",
                self.name,
                len(tool_calls),
            )

        tc = tool_calls[0]
        if tc.function is None or not tc.function.name:
            raise ProviderError("Invalid response from LLM: missing function in tool call")

        raw_args = tc.function.arguments or "{}"
        try:
            args = json.loads(raw_args)
        except json.JSONDecodeError as e:
            raise ProviderError(f"Invalid response from LLM: bad args JSON: {e}") from e

        if args is None:
            args = {}
        if not isinstance(args, dict):
            raise ProviderError(
                f"Invalid response from LLM: tool arguments must be an object, got {type(args).__name__}"
            )

        if tc.id:
            return ToolCallRequest(name=tc.function.name, arguments=args, id=tc.id)
        return ToolCallRequest(name=tc.function.name, arguments=args)

    def _connection_error(self, error: Exception) -> ProviderError:
        return ProviderError(f"{self.name} unreachable at {self.base_url}: {error}")

    async def complete(
        self,
        messages: list[Message],
        tools: list[ToolSpec],
        model: str,
    ) -> ProviderResponse:
        """Request the next step.

        Args:
            messages: Conversation history.
            tools: Tool catalog.
            model: Model override; empty selects the default model.

        Returns:
            FinalAnswer or ToolCallRequest.

        Raises:
            ProviderError: On API, transport or parsing failure.
        """
        params: dict[str, Any] = {
            "model": model or self.model,
            "messages": self._convert_messages(messages),
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        if tools:
            params["tools"] = self._convert_tools(tools)
            params["tool_choice"] = "auto"

        try:
            response = await self.client.chat.completions.create(**params)
        except openai.APIConnectionError as e:
            raise self._connection_error(e) from e
        except openai.APIStatusError as e:
            raise ProviderError(f"{self.name} {e.status_code}: {e.message}") from e
        except openai.APIError as e:
            raise ProviderError(f"{self.name} request failed: {e}") from e

        choices = getattr(response, "choices", None)
        if not choices:
            raise ProviderError("Invalid response from LLM: missing 'choices'")

        message = choices[0].message

        call = self._parse_tool_call(message.tool_calls)
        if call is not None:
            return call

        if not message.content:
            raise ProviderError("Empty response from model")

        return FinalAnswer(text=message.content)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
