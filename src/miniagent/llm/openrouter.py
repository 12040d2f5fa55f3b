"""OpenRouter provider, giving access to many hosted models through one API."""

from miniagent.llm.openai_compat import OpenAICompatibleProvider

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_REFERER = "https://github.com/miniagent/miniagent"
OPENROUTER_TITLE = "miniagent"


class OpenRouterProvider(OpenAICompatibleProvider):
    """Provider for openrouter.ai.

    OpenRouter mirrors the OpenAI chat completions API and uses the
    ``HTTP-Referer`` and ``X-Title`` headers to attribute requests.
    """

    name = "OpenRouter"

    def __init__(
        self,
        api_key: str,
        model: str = "meta-llama/llama-3.1-8b-instruct",
        base_url: str = OPENROUTER_BASE_URL,
        timeout: int = 120,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> None:
        """Initialize OpenRouter provider.

        Args:
            api_key: OpenRouter API key
            model: Default model slug (e.g., "meta-llama/llama-3.1-8b-instruct")
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
            default_headers={
                "HTTP-Referer": OPENROUTER_REFERER,
                "X-Title": OPENROUTER_TITLE,
            },
        )
