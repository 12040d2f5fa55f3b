"""Pydantic models for miniagent.yaml configuration."""

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant. Only call tools that are directly needed to answer "
    "the question. Never call unrelated tools. Once you receive a tool result, use it "
    "to give the final answer immediately."
)

DEFAULT_MAX_STEPS = 6

Backend = Literal["openrouter", "openai", "anthropic", "ollama"]

# Environment variables consulted when no api_key is configured
API_KEY_ENV_VARS: dict[str, str | None] = {
    "openrouter": "OPENROUTER_API_KEY",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "ollama": None,
}

DEFAULT_MODELS: dict[str, str] = {
    "openrouter": "meta-llama/llama-3.1-8b-instruct",
    "openai": "gpt-4o-mini",
    "anthropic": "claude-sonnet-4-20250514",
    "ollama": "llama3",
}


class AgentConfig(BaseModel):
    """Agent loop configuration.

    Immutable: builder methods on the agent produce a new instance with
    ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(default="", description="Model identifier ('' uses the provider default)")
    system_prompt: str = Field(
        default=DEFAULT_SYSTEM_PROMPT,
        description="System prompt seeded into the conversation",
    )
    max_steps: int = Field(
        default=DEFAULT_MAX_STEPS, description="Maximum agent reasoning steps", ge=1
    )
    validate_arguments: bool = Field(
        default=False,
        description="Validate tool arguments against the tool's JSON Schema before execution",
    )


class ProviderConfig(BaseModel):
    """LLM provider configuration."""

    backend: Backend = Field(default="openrouter", description="Provider backend to use")
    model: str | None = Field(default=None, description="Model name (backend default if unset)")
    api_key: str | None = Field(default=None, description="API key (overrides api_key_env)")
    api_key_env: str | None = Field(
        default=None, description="Environment variable holding the API key"
    )
    base_url: str | None = Field(default=None, description="Override the backend endpoint")
    timeout: int = Field(default=120, description="Request timeout in seconds", ge=1)
    temperature: float = Field(default=0.7, description="Sampling temperature", ge=0.0, le=2.0)
    max_tokens: int = Field(default=1024, description="Maximum tokens per completion", ge=1)

    def resolve_model(self) -> str:
        """Return the configured model or the backend default."""
        return self.model or DEFAULT_MODELS[self.backend]

    def resolve_api_key(self) -> str | None:
        """Return the API key from config or the environment."""
        if self.api_key:
            return self.api_key
        env_var = self.api_key_env or API_KEY_ENV_VARS[self.backend]
        if env_var is None:
            return None
        return os.environ.get(env_var)


class ToolsConfig(BaseModel):
    """Built-in tool availability."""

    enabled: list[str] = Field(
        default=["add_numbers", "multiply_numbers", "get_joke"],
        description="Built-in tools registered on the agent",
    )


class MiniAgentConfig(BaseModel):
    """Root configuration."""

    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    agent: AgentConfig = Field(default_factory=AgentConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
