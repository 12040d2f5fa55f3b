"""Pytest configuration and shared fixtures."""

import pytest

from miniagent.config.schema import AgentConfig, MiniAgentConfig, ProviderConfig, ToolsConfig


@pytest.fixture
def default_config() -> MiniAgentConfig:
    """Provide a default configuration for tests."""
    return MiniAgentConfig()


@pytest.fixture
def custom_config() -> MiniAgentConfig:
    """Provide a custom configuration for tests."""
    return MiniAgentConfig(
        provider=ProviderConfig(backend="ollama", model="qwen2.5:7b"),
        agent=AgentConfig(max_steps=3),
        tools=ToolsConfig(enabled=["add_numbers"]),
    )
