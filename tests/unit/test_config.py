"""
Unit tests for configuration management.
"""

import pytest

from spoticus.config import Config, ConfigError, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and .env files."""
    for name in (
        "SLACK_BOT_TOKEN",
        "SLACK_APP_TOKEN",
        "SPOTICUS_SLACK_BOT_TOKEN",
        "SPOTICUS_SLACK_APP_TOKEN",
        "SPOTICUS_KUBERNETES_CONTEXT",
        "SPOTICUS_MAPT_GROUP",
        "SPOTICUS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestConfigDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        config = load_config()

        assert config.slack_bot_token is None
        assert config.slack_app_token is None
        assert config.kubernetes_context is None
        assert config.mapt_group == "mapt.redhat.com"
        assert config.mapt_version == "v1alpha1"
        assert config.mapt_kind_plural == "kinds"
        assert config.mapt_openshift_plural == "openshifts"
        assert config.log_level == "INFO"

    def test_kubernetes_config(self):
        config = Config(kubernetes_context="dev")
        assert config.get_kubernetes_config() == {
            "context": "dev",
            "group": "mapt.redhat.com",
            "version": "v1alpha1",
            "kind_plural": "kinds",
            "openshift_plural": "openshifts",
        }


class TestEnvironment:
    """Test environment variable loading."""

    def test_slack_tokens_from_env(self, monkeypatch):
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-1")
        monkeypatch.setenv("SLACK_APP_TOKEN", "xapp-1")

        assert load_config().require_slack_tokens() == ("xoxb-1", "xapp-1")

    def test_prefixed_settings(self, monkeypatch):
        monkeypatch.setenv("SPOTICUS_KUBERNETES_CONTEXT", "mapt-prod")
        monkeypatch.setenv("SPOTICUS_LOG_LEVEL", "DEBUG")

        config = load_config()

        assert config.kubernetes_context == "mapt-prod"
        assert config.log_level == "DEBUG"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("SLACK_BOT_TOKEN=xoxb-file\nSLACK_APP_TOKEN=xapp-file\n")
        assert load_config().require_slack_tokens() == ("xoxb-file", "xapp-file")

    def test_tokens_are_not_echoed(self, monkeypatch):
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-secret")
        assert "xoxb-secret" not in repr(load_config())


class TestRequireSlackTokens:
    """Test startup token validation."""

    def test_missing_bot_token(self, monkeypatch):
        monkeypatch.setenv("SLACK_APP_TOKEN", "xapp-1")
        with pytest.raises(ConfigError, match="SLACK_BOT_TOKEN"):
            load_config().require_slack_tokens()

    def test_missing_app_token(self, monkeypatch):
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-1")
        with pytest.raises(ConfigError, match="SLACK_APP_TOKEN"):
            load_config().require_slack_tokens()

    def test_empty_token_is_missing(self, monkeypatch):
        monkeypatch.setenv("SLACK_BOT_TOKEN", "")
        monkeypatch.setenv("SLACK_APP_TOKEN", "xapp-1")
        with pytest.raises(ConfigError, match="SLACK_BOT_TOKEN"):
            load_config().require_slack_tokens()
