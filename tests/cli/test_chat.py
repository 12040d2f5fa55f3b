"""Tests for the interactive chat command."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from miniagent.agent.loop import Agent
from miniagent.cli.chat import _async_chat, _handle_slash_command, chat_command
from miniagent.config.schema import MiniAgentConfig
from miniagent.errors import ProviderError
from miniagent.tools.arithmetic import AddNumbersTool


@pytest.fixture
def agent() -> Agent:
    provider = MagicMock()
    provider.name = "Mock"
    return Agent(provider, "test-model", tools=[AddNumbersTool()])


@pytest.fixture
def mock_console():
    with patch("miniagent.cli.chat.console") as console:
        yield console


def _printed(console: MagicMock) -> str:
    return "\n".join(str(call.args[0]) for call in console.print.call_args_list if call.args)


@pytest.mark.parametrize("command", ["/exit", "/quit", "/q", " /EXIT "])
def test_exit_commands(command, agent, mock_console):
    assert _handle_slash_command(command, MiniAgentConfig(), agent) is True


def test_help_command(agent, mock_console):
    assert _handle_slash_command("/help", MiniAgentConfig(), agent) is False
    assert "/history" in _printed(mock_console)


def test_tools_command(agent, mock_console):
    _handle_slash_command("/tools", MiniAgentConfig(), agent)
    assert "add_numbers" in _printed(mock_console)


def test_config_command(agent, mock_console):
    _handle_slash_command("/config", MiniAgentConfig(), agent)
    output = _printed(mock_console)
    assert "openrouter" in output
    assert "test-model" in output
    assert "Max steps: 6" in output


def test_clear_command(agent, mock_console):
    _handle_slash_command("/clear", MiniAgentConfig(), agent)
    mock_console.clear.assert_called_once()


def test_history_command(agent, mock_console):
    with patch("miniagent.cli.chat.print_history") as mock_history:
        _handle_slash_command("/history", MiniAgentConfig(), agent)
        mock_history.assert_called_once_with(agent)


def test_unknown_command(agent, mock_console):
    assert _handle_slash_command("/dance", MiniAgentConfig(), agent) is False
    assert "Unknown command" in _printed(mock_console)


@pytest.mark.asyncio
async def test_chat_loop_runs_agent_and_exits(mock_console):
    agent = MagicMock()
    agent.provider.close = AsyncMock()
    agent.run = AsyncMock(side_effect=["11", ProviderError("[Mock] step 0: down")])

    with patch("miniagent.cli.chat.Prompt.ask", side_effect=["4 + 7?", "", "again", "/exit"]):
        await _async_chat(MiniAgentConfig(), agent)

    assert agent.run.await_count == 2
    output = _printed(mock_console)
    assert "down" in output
    assert "Goodbye" in output
    agent.provider.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_chat_loop_eof(mock_console):
    agent = MagicMock()
    agent.provider.close = AsyncMock()
    with patch("miniagent.cli.chat.Prompt.ask", side_effect=EOFError):
        await _async_chat(MiniAgentConfig(), agent)

    assert "Goodbye" in _printed(mock_console)
    agent.provider.close.assert_awaited_once()


def test_chat_command_setup_failure(mock_console):
    with patch("miniagent.cli.chat.build_agent", side_effect=ValueError("bad backend")):
        chat_command(config_path="/nonexistent/miniagent.yaml")

    assert "Failed to set up agent" in _printed(mock_console)
