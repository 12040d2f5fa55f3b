"""Factory function for creating providers from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from miniagent.config.loader import ConfigError
from miniagent.config.schema import API_KEY_ENV_VARS
from miniagent.llm.anthropic import ANTHROPIC_BASE_URL, AnthropicProvider
from miniagent.llm.ollama import OllamaProvider
from miniagent.llm.openai import OPENAI_BASE_URL, OpenAIProvider
from miniagent.llm.openrouter import OPENROUTER_BASE_URL, OpenRouterProvider

if TYPE_CHECKING:
    from miniagent.config.schema import ProviderConfig
    from miniagent.llm.client import Provider


def create_provider(config: ProviderConfig) -> Provider:
    """Create a provider based on configuration.

    Args:
        config: Provider configuration.

    Returns:
        A provider for the configured backend.

    Raises:
        ConfigError: If the backend needs an API key and none is available.
        ValueError: If the backend is not recognised.
    """
    backend = config.backend
    model = config.resolve_model()

    if backend == "ollama":
        return OllamaProvider(
            model=model,
            base_url=config.base_url or "http://localhost:11434/v1",
            timeout=config.timeout,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )

    api_key = config.resolve_api_key()
    if not api_key:
        raise ConfigError(
            f"No API key for backend '{backend}': set provider.api_key or the "
            f"{config.api_key_env or API_KEY_ENV_VARS[backend]} environment variable"
        )

    if backend == "openrouter":
        return OpenRouterProvider(
            api_key=api_key,
            model=model,
            base_url=config.base_url or OPENROUTER_BASE_URL,
            timeout=config.timeout,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    elif backend == "openai":
        return OpenAIProvider(
            api_key=api_key,
            model=model,
            base_url=config.base_url or OPENAI_BASE_URL,
            timeout=config.timeout,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    elif backend == "anthropic":
        return AnthropicProvider(
            api_key=api_key,
            model=model,
            base_url=config.base_url or ANTHROPIC_BASE_URL,
            timeout=config.timeout,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    else:
        raise ValueError(f"Unknown provider backend: {backend}")
