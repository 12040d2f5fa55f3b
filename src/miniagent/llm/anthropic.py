"""Anthropic Claude provider using httpx.

Implements the Provider protocol for the Anthropic Messages API.
Uses httpx directly to avoid adding the anthropic SDK as a dependency.
"""

import logging
from typing import Any

import httpx

from miniagent.errors import ProviderError
from miniagent.llm.client import FinalAnswer, Message, ProviderResponse, Role, ToolCallRequest
from miniagent.tools.base import ToolSpec

logger = logging.getLogger(__name__)

ANTHROPIC_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_API_VERSION = "2023-06-01"


class AnthropicProvider:
    """Provider for the Anthropic Messages API."""

    name = "Anthropic"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        base_url: str = ANTHROPIC_BASE_URL,
        max_tokens: int = 1024,
        timeout: int = 120,
        temperature: float = 0.7,
    ):
        """Initialize Anthropic provider.

        Args:
            api_key: Anthropic API key
            model: Default model (e.g., "claude-sonnet-4-20250514")
            base_url: API host
            max_tokens: Max tokens for responses
            timeout: Request timeout in seconds
            temperature: Sampling temperature
        """
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

        self.client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "x-api-key": api_key,
                "anthropic-version": ANTHROPIC_API_VERSION,
                "content-type": "application/json",
            },
            timeout=httpx.Timeout(timeout),
        )

    def _convert_messages(self, messages: list[Message]) -> tuple[str | None, list[dict[str, Any]]]:
        """Convert internal Message format to Anthropic format.

        Anthropic requires the system message to be separate from the
        messages array, so we extract it.

        Args:
            messages: List of Message objects

        Returns:
            Tuple of (system_prompt, anthropic_messages)
        """
        system_prompt = None
        anthropic_messages: list[dict[str, Any]] = []

        for msg in messages:
            if msg.role is Role.SYSTEM:
                system_prompt = msg.content
                continue

            if msg.role is Role.ASSISTANT and msg.tool_call:
                content_blocks: list[dict[str, Any]] = []
                if msg.content:
                    content_blocks.append({"type": "text", "text": msg.content})
                content_blocks.append(
                    {
                        "type": "tool_use",
                        "id": msg.tool_call.id,
                        "name": msg.tool_call.name,
                        "input": msg.tool_call.arguments,
                    }
                )
                anthropic_messages.append({"role": "assistant", "content": content_blocks})

            elif msg.role is Role.TOOL:
                # Tool results travel in a user turn
                block: dict[str, Any] = {
                    "type": "tool_result",
                    "tool_use_id": msg.tool_call_id,
                    "content": msg.content,
                }
                if msg.is_error:
                    block["is_error"] = True
                anthropic_messages.append({"role": "user", "content": [block]})

            else:
                anthropic_messages.append({"role": msg.role.value, "content": msg.content})

        return system_prompt, anthropic_messages

    def _convert_tools(self, tools: list[ToolSpec]) -> list[dict[str, Any]]:
        return [
            {
                "name": spec.name,
                "description": spec.description,
                "input_schema": spec.parameters_schema,
            }
            for spec in tools
        ]

    def _parse_content(self, data: Any) -> ProviderResponse:
        """Parse Anthropic response content blocks into a ProviderResponse."""
        content_blocks = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content_blocks, list):
            raise ProviderError("Invalid response from LLM: missing 'content' array")

        text_parts: list[str] = []
        tool_calls: list[ToolCallRequest] = []

        for block in content_blocks:
            if not isinstance(block, dict):
                raise ProviderError("Invalid response from LLM: content block is not an object")
            block_type = block.get("type")
            if block_type == "text" and block.get("text"):
                text_parts.append(block["text"])
            elif block_type == "tool_use":
                if not block.get("name"):
                    raise ProviderError("Invalid response from LLM: tool_use block without name")
                arguments = block.get("input")
                if arguments is None:
                    arguments = {}
                if not isinstance(arguments, dict):
                    raise ProviderError(
                        "Invalid response from LLM: tool_use input must be an object, "
                        f"got {type(arguments).__name__}"
                    )
                if block.get("id"):
                    tool_calls.append(
                        ToolCallRequest(name=block["name"], arguments=arguments, id=block["id"])
                    )
                else:
                    tool_calls.append(ToolCallRequest(name=block["name"], arguments=arguments))

        if tool_calls:
            if len(tool_calls) > 1:
                logger.warning(
                    "Anthropic returned %d tool calls; only the first is executed",
                    len(tool_calls),
                )
            return tool_calls[0]

        if not text_parts:
            raise ProviderError("Empty response from model")

        return FinalAnswer(text="\n".join(text_parts))

    async def complete(
        self,
        messages: list[Message],
        tools: list[ToolSpec],
        model: str,
    ) -> ProviderResponse:
        """Request the next step from Anthropic Claude.

        Args:
            messages: Conversation history
            tools: Tool catalog
            model: Model override; empty selects the default model

        Returns:
            FinalAnswer or ToolCallRequest

        Raises:
            ProviderError: On HTTP, transport or parsing failure
        """
        system_prompt, anthropic_messages = self._convert_messages(messages)

        payload: dict[str, Any] = {
            "model": model or self.model,
            "messages": anthropic_messages,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

        if system_prompt:
            payload["system"] = system_prompt

        if tools:
            payload["tools"] = self._convert_tools(tools)

        try:
            response = await self.client.post("/v1/messages", json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"Anthropic {e.response.status_code}: {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Anthropic request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"Invalid response from LLM: {e}") from e

        return self._parse_content(data)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
