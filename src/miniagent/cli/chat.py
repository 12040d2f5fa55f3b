"""Interactive chat REPL command."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from miniagent.agent.builder import build_agent
from miniagent.cli.run_cmd import print_history
from miniagent.config.loader import ConfigError, load_config
from miniagent.errors import AgentError

if TYPE_CHECKING:
    from miniagent.agent.loop import Agent
    from miniagent.config.schema import MiniAgentConfig

console = Console()
logger = logging.getLogger(__name__)


def chat_command(config_path: str | None = None) -> None:
    """Start interactive chat session.

    Args:
        config_path: Optional path to config file
    """
    path = Path(config_path) if config_path else None
    try:
        config = load_config(path)
        agent = build_agent(config)
    except (ConfigError, AgentError, KeyError, ValueError) as e:
        console.print(f"[red]Failed to set up agent: {e}[/red]")
        return

    console.print(
        Panel.fit(
            f"[bold blue]miniagent chat[/bold blue]\n"
            f"Provider: {config.provider.backend}  Model: {agent.model}\n"
            f"Type /help for commands, /exit to quit",
            border_style="blue",
        )
    )

    asyncio.run(_async_chat(config, agent))


async def _async_chat(config: MiniAgentConfig, agent: Agent) -> None:
    """Run the chat loop, closing the provider's HTTP client on exit.

    Args:
        config: Loaded configuration
        agent: Agent built from the configuration
    """
    try:
        await _chat_loop(config, agent)
    finally:
        await agent.provider.close()


async def _chat_loop(config: MiniAgentConfig, agent: Agent) -> None:
    """Read prompts until the user exits.

    The same agent is reused, so the conversation carries over between turns.
    """
    while True:
        try:
            user_input = Prompt.ask("\n[bold cyan]You[/bold cyan]")

            if not user_input.strip():
                continue

            if user_input.startswith("/"):
                if _handle_slash_command(user_input, config, agent):
                    break
                continue

            with console.status("[bold green]Thinking...[/bold green]", spinner="dots"):
                response = await agent.run(user_input)

            console.print("\n[bold green]miniagent[/bold green]")
            console.print(Markdown(response))

        except KeyboardInterrupt:
            console.print("\n[yellow]Interrupted[/yellow]")
            if Confirm.ask("Exit chat?", default=False):
                break
        except EOFError:
            break
        except AgentError as e:
            logger.debug("Run failed", exc_info=True)
            console.print(f"\n[red]Error: {e}[/red]")

    console.print("\n[cyan]Goodbye![/cyan]")


def _handle_slash_command(command: str, config: MiniAgentConfig, agent: Agent) -> bool:
    """Handle slash commands.

    Args:
        command: Command string starting with /
        config: Current configuration
        agent: Active agent

    Returns:
        True if should exit chat loop
    """
    cmd = command.lower().strip()

    if cmd in ("/exit", "/quit", "/q"):
        return True

    elif cmd == "/help":
        console.print("\n[bold]Available commands:[/bold]")
        console.print("  /help      - Show this help")
        console.print("  /exit      - Exit chat")
        console.print("  /clear     - Clear screen")
        console.print("  /tools     - List registered tools")
        console.print("  /history   - Show the conversation")
        console.print("  /config    - Show configuration")

    elif cmd == "/clear":
        console.clear()

    elif cmd == "/tools":
        console.print("\n[bold]Registered tools:[/bold]")
        for spec in agent.tools.catalog():
            console.print(f"  • {spec.name} - {spec.description[:60]}")

    elif cmd == "/history":
        print_history(agent)

    elif cmd == "/config":
        console.print("\n[bold]Configuration:[/bold]")
        console.print(f"  Provider: {config.provider.backend}")
        console.print(f"  Model: {agent.model}")
        console.print(f"  Max steps: {agent.config.max_steps}")
        console.print(f"  Temperature: {config.provider.temperature}")
        console.print(f"  Validate arguments: {agent.config.validate_arguments}")

    else:
        console.print(f"[red]Unknown command: {command}[/red]")
        console.print("Type /help for available commands")

    return False
