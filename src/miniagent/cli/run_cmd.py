"""One-shot ``miniagent run`` command."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.console import Console

from miniagent.agent.builder import build_agent
from miniagent.config.loader import ConfigError, load_config
from miniagent.errors import AgentError
from miniagent.llm.client import Role

if TYPE_CHECKING:
    from miniagent.agent.loop import Agent
    from miniagent.config.schema import MiniAgentConfig

console = Console()


def apply_overrides(
    config: MiniAgentConfig,
    provider: str | None = None,
    model: str | None = None,
    max_steps: int | None = None,
) -> MiniAgentConfig:
    """Apply command-line overrides on top of the loaded configuration."""
    provider_update: dict[str, object] = {}
    if provider:
        provider_update["backend"] = provider
    if model:
        provider_update["model"] = model

    agent_update: dict[str, object] = {}
    if model:
        agent_update["model"] = model
    if max_steps:
        agent_update["max_steps"] = max_steps

    data = config.model_dump()
    data["provider"].update(provider_update)
    data["agent"].update(agent_update)
    return type(config).model_validate(data)


def print_history(agent: Agent) -> None:
    """Print the agent conversation, skipping empty turns."""
    console.print("\n[bold]--- Conversation History ---[/bold]")
    for msg in agent.history:
        if msg.tool_call:
            text = f"call {msg.tool_call.name}({msg.tool_call.arguments})"
        else:
            text = msg.content
        if not text.strip():
            continue
        label = f"{msg.role.value}:{msg.name}" if msg.role is Role.TOOL else msg.role.value
        console.print(f"{label} → {text}", markup=False)


def run_command(
    prompt: str,
    config_path: str | None = None,
    provider: str | None = None,
    model: str | None = None,
    max_steps: int | None = None,
    show_history: bool = False,
) -> None:
    """Run the agent on a single prompt.

    Args:
        prompt: User prompt
        config_path: Optional path to config file
        provider: Provider backend override
        model: Model override
        max_steps: Step budget override
        show_history: Print the conversation afterwards
    """
    path = Path(config_path) if config_path else None
    try:
        config = apply_overrides(load_config(path), provider, model, max_steps)
        agent = build_agent(config)
    except (ConfigError, AgentError, KeyError, ValueError) as e:
        console.print(f"[red]Failed to set up agent: {e}[/red]")
        raise typer.Exit(code=1)

    try:
        answer = asyncio.run(_run_once(agent, prompt))
    except AgentError as e:
        console.print(f"[red]Error: {e}[/red]")
        if show_history:
            print_history(agent)
        raise typer.Exit(code=1)

    console.print(answer, markup=False)
    if show_history:
        print_history(agent)


async def _run_once(agent: Agent, prompt: str) -> str:
    """Run the agent and close the provider's HTTP client afterwards."""
    try:
        return await agent.run(prompt)
    finally:
        await agent.provider.close()
