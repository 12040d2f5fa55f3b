"""Ollama provider for locally served models."""

from miniagent.errors import ProviderError
from miniagent.llm.openai_compat import OpenAICompatibleProvider


class OllamaProvider(OpenAICompatibleProvider):
    """Provider that wraps Ollama's OpenAI-compatible API.

    Ollama exposes ``/v1/chat/completions`` since v0.1.24, so this only sets
    local defaults and a friendlier error when the server is not running.
    """

    name = "Ollama"

    def __init__(
        self,
        model: str = "llama3",
        base_url: str = "http://localhost:11434/v1",
        timeout: int = 120,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ):
        """Initialize Ollama provider.

        Args:
            model: Any locally pulled model (e.g., "llama3", "mistral", "qwen2")
            base_url: Ollama OpenAI-compatible endpoint
            timeout: Request timeout in seconds
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
        """
        super().__init__(
            model=model,
            base_url=base_url.rstrip("/"),
            api_key="ollama",  # Ollama doesn't use API keys but SDK requires one
            timeout=timeout,
            temperature=temperature,
            max_tokens=max_tokens,
        )

    def _connection_error(self, error: Exception) -> ProviderError:
        return ProviderError(
            f"Ollama unreachable at {self.base_url}, is it running? ({error})"
        )
