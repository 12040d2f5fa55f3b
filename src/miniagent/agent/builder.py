"""Agent builder for constructing agents from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from miniagent.agent.loop import Agent
from miniagent.llm.factory import create_provider
from miniagent.tools import builtin_tools

if TYPE_CHECKING:
    from miniagent.config.schema import MiniAgentConfig
    from miniagent.llm.client import Provider


def build_agent(config: MiniAgentConfig, provider: Provider | None = None) -> Agent:
    """Create an Agent from configuration.

    Args:
        config: Full configuration
        provider: Provider to use instead of the one described by ``config.provider``

    Returns:
        Agent with the enabled built-in tools registered
    """
    if provider is None:
        provider = create_provider(config.provider)

    model = config.agent.model or config.provider.resolve_model()
    return Agent(
        provider,
        model,
        tools=builtin_tools(config.tools.enabled),
        config=config.agent,
    )
