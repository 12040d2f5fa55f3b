"""Provider protocol and LLM backend adapters."""

from .anthropic import AnthropicProvider
from .client import FinalAnswer, Message, Provider, ProviderResponse, Role, ToolCallRequest
from .factory import create_provider
from .ollama import OllamaProvider
from .openai import OpenAIProvider
from .openai_compat import OpenAICompatibleProvider
from .openrouter import OpenRouterProvider

__all__ = [
    "AnthropicProvider",
    "FinalAnswer",
    "Message",
    "OllamaProvider",
    "OpenAICompatibleProvider",
    "OpenAIProvider",
    "OpenRouterProvider",
    "Provider",
    "ProviderResponse",
    "Role",
    "ToolCallRequest",
    "create_provider",
]
