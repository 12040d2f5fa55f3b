"""Main CLI application using Typer."""

import logging

import typer
from rich.console import Console

from miniagent import __version__

app = typer.Typer(
    name="miniagent",
    help="miniagent - A small ReAct agent loop for tool-using LLMs",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """miniagent - A small ReAct agent loop for tool-using LLMs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version():
    """Show miniagent version."""
    console.print(f"miniagent version {__version__}")


@app.command()
def run(
    prompt: str = typer.Argument(..., help="Prompt to send to the agent"),
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.miniagent/miniagent.yaml)",
    ),
    provider: str = typer.Option(
        None, "--provider", "-p", help="Provider backend: openrouter, openai, anthropic, ollama"
    ),
    model: str = typer.Option(None, "--model", "-m", help="Model identifier"),
    max_steps: int = typer.Option(None, "--max-steps", help="Maximum agent steps", min=1),
    show_history: bool = typer.Option(
        False, "--show-history", help="Print the conversation after the answer"
    ),
):
    """Run the agent once on a prompt and print the answer."""
    from miniagent.cli.run_cmd import run_command

    run_command(
        prompt,
        config_path=config_path,
        provider=provider,
        model=model,
        max_steps=max_steps,
        show_history=show_history,
    )


@app.command()
def chat(
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.miniagent/miniagent.yaml)",
    ),
):
    """Start interactive chat session."""
    from miniagent.cli.chat import chat_command

    chat_command(config_path=config_path)


@app.command()
def tools():
    """List built-in tools."""
    from miniagent.tools import builtin_tools

    console.print("\n[bold]Built-in tools:[/bold]")
    for t in builtin_tools():
        console.print(f"  • {t.name} - {t.description}")


if __name__ == "__main__":
    app()
