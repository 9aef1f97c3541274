"""
Unit tests for CLI commands.
"""
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from spoticus.cli import app
from spoticus.config import ConfigError

runner = CliRunner()


class TestVersionCommand:
    """Tests for version command."""

    def test_version_displays_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Spoticus version 0.1.0" in result.stdout


class TestRunCommand:
    """Tests for the run command."""

    @patch("spoticus.cli.run_slack_bot")
    @patch("spoticus.cli.load_config")
    def test_missing_token_is_fatal(self, mock_load_config, mock_run_bot):
        mock_load_config.return_value.require_slack_tokens.side_effect = ConfigError(
            "SLACK_BOT_TOKEN environment variable is not set."
        )

        result = runner.invoke(app, ["run"])

        assert result.exit_code == 1
        assert "SLACK_BOT_TOKEN" in result.stdout
        mock_run_bot.assert_not_called()

    @patch("spoticus.cli.asyncio.run")
    @patch("spoticus.cli.run_slack_bot", new_callable=MagicMock)
    @patch("spoticus.cli.configure_logging")
    @patch("spoticus.cli.load_config")
    def test_starts_bot(self, mock_load_config, mock_configure_logging, mock_run_bot, mock_asyncio_run):
        config = mock_load_config.return_value
        config.require_slack_tokens.return_value = ("xoxb-1", "xapp-1")
        config.log_level = "INFO"

        result = runner.invoke(app, ["run"])

        assert result.exit_code == 0
        mock_configure_logging.assert_called_once_with("INFO")
        mock_run_bot.assert_called_once_with("xoxb-1", "xapp-1", config)
        mock_asyncio_run.assert_called_once_with(mock_run_bot.return_value)


class TestDispatchCommand:
    """Tests for the local dispatch command."""

    @patch("spoticus.cli.configure_logging")
    @patch("spoticus.cli.load_config")
    def test_launch(self, mock_load_config, mock_configure_logging):
        result = runner.invoke(app, ["dispatch", "launch k8s large", "--user", "U42"])

        assert result.exit_code == 0
        assert "<@U42>" in result.stdout
        assert "16 CPUs" in result.stdout
        assert "64 GB RAM" in result.stdout

    @patch("spoticus.cli.configure_logging")
    @patch("spoticus.cli.load_config")
    def test_unknown_shows_help(self, mock_load_config, mock_configure_logging):
        result = runner.invoke(app, ["dispatch", "frobnicate"])

        assert result.exit_code == 0
        assert "Available commands" in result.stdout

    @patch("spoticus.cli.configure_logging")
    @patch("spoticus.cli.load_config")
    def test_blank(self, mock_load_config, mock_configure_logging):
        result = runner.invoke(app, ["dispatch", "   "])

        assert result.exit_code == 0
        assert "No reply" in result.stdout

    @patch("spoticus.cli.sys")
    @patch("spoticus.cli.Dispatcher")
    @patch("spoticus.cli.configure_logging")
    @patch("spoticus.cli.load_config")
    def test_logging_configured_on_stderr_before_routing(
        self, mock_load_config, mock_configure_logging, mock_dispatcher, mock_sys
    ):
        mock_load_config.return_value.log_level = "DEBUG"
        calls = []
        mock_configure_logging.side_effect = lambda level, stream: calls.append(("logging", level, stream))
        mock_dispatcher.return_value.route.side_effect = lambda message: calls.append(("route",)) or "ok"

        result = runner.invoke(app, ["dispatch", "list"])

        assert result.exit_code == 0
        assert [c[0] for c in calls] == ["logging", "route"]
        _, level, stream = calls[0]
        assert level == "DEBUG"
        assert stream is mock_sys.stderr
