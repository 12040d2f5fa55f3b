"""Native OpenAI provider (api.openai.com)."""

from miniagent.llm.openai_compat import OpenAICompatibleProvider

OPENAI_BASE_URL = "https://api.openai.com/v1"


class OpenAIProvider(OpenAICompatibleProvider):
    """Provider for the OpenAI chat completions API."""

    name = "OpenAI"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str = OPENAI_BASE_URL,
        timeout: int = 120,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> None:
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Default model (e.g., "gpt-4o", "gpt-4o-mini")
            base_url: API endpoint
            timeout: Request timeout in seconds
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
        """
        super().__init__(
            model=model,
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            temperature=temperature,
            max_tokens=max_tokens,
        )
