"""Tests for CLI app entry point."""

from unittest.mock import AsyncMock, MagicMock, patch

from typer.testing import CliRunner

from miniagent.cli.app import app
from miniagent.cli.run_cmd import apply_overrides
from miniagent.config.schema import MiniAgentConfig
from miniagent.errors import MaxStepsExceededError
from miniagent.llm.client import Message

runner = CliRunner()


def _mock_agent(answer=None, error=None) -> MagicMock:
    agent = MagicMock()
    agent.run = AsyncMock(return_value=answer, side_effect=error)
    agent.provider.close = AsyncMock()
    agent.history = (
        Message.system("sys"),
        Message.user("What is 4 + 7?"),
        Message.assistant("11"),
    )
    return agent


def test_version_command():
    """Test 'version' prints miniagent version string."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "miniagent version" in result.output


def test_no_args_shows_help():
    """Test invoking with no arguments shows help (no_args_is_help)."""
    result = runner.invoke(app, [])
    assert result.exit_code in (0, 2)
    assert "Usage" in result.output or "miniagent" in result.output


def test_tools_command():
    result = runner.invoke(app, ["tools"])
    assert result.exit_code == 0
    assert "add_numbers" in result.output
    assert "get_joke" in result.output


def test_chat_command_delegates():
    """Test 'chat' delegates to chat_command."""
    with patch("miniagent.cli.chat.chat_command") as mock_chat:
        result = runner.invoke(app, ["chat", "--config", "/tmp/x.yaml"])
        mock_chat.assert_called_once_with(config_path="/tmp/x.yaml")
        assert result.exit_code == 0


def test_run_prints_answer(tmp_path):
    agent = _mock_agent(answer="The answer is 11")
    with patch("miniagent.cli.run_cmd.build_agent", return_value=agent) as mock_build:
        result = runner.invoke(
            app,
            ["run", "What is 4 + 7?", "--config", str(tmp_path / "none.yaml"), "--max-steps", "3"],
        )

    assert result.exit_code == 0
    assert "The answer is 11" in result.output
    agent.run.assert_awaited_once_with("What is 4 + 7?")
    agent.provider.close.assert_awaited_once()
    config = mock_build.call_args.args[0]
    assert config.agent.max_steps == 3


def test_run_show_history(tmp_path):
    agent = _mock_agent(answer="11")
    with patch("miniagent.cli.run_cmd.build_agent", return_value=agent):
        result = runner.invoke(
            app, ["run", "What is 4 + 7?", "-c", str(tmp_path / "none.yaml"), "--show-history"]
        )

    assert result.exit_code == 0
    assert "Conversation History" in result.output
    assert "user → What is 4 + 7?" in result.output


def test_run_agent_error_exits_nonzero(tmp_path):
    agent = _mock_agent(error=MaxStepsExceededError(2))
    with patch("miniagent.cli.run_cmd.build_agent", return_value=agent):
        result = runner.invoke(app, ["run", "loop forever", "-c", str(tmp_path / "none.yaml")])

    assert result.exit_code == 1
    assert "Error" in result.output
    agent.provider.close.assert_awaited_once()


def test_run_missing_api_key(tmp_path, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    result = runner.invoke(
        app, ["run", "Hi", "-c", str(tmp_path / "none.yaml"), "--provider", "openai"]
    )

    assert result.exit_code == 1
    assert "OPENAI_API_KEY" in result.output


def test_apply_overrides():
    config = apply_overrides(MiniAgentConfig(), provider="ollama", model="mistral", max_steps=2)

    assert config.provider.backend == "ollama"
    assert config.provider.model == "mistral"
    assert config.agent.model == "mistral"
    assert config.agent.max_steps == 2


def test_apply_overrides_noop():
    assert apply_overrides(MiniAgentConfig()) == MiniAgentConfig()
