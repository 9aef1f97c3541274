"""
Configuration management for Spoticus.

Implements multi-level configuration loading with precedence:
1. Environment variables (highest priority)
2. Project config (./.spoticus/config.yaml)
3. User config (~/.spoticus/config.yaml)
4. System config (/etc/spoticus/config.yaml)

The Slack tokens are read from the conventional SLACK_BOT_TOKEN and
SLACK_APP_TOKEN variables (SPOTICUS_-prefixed names are accepted too).
"""

from pathlib import Path
from typing import Literal, Optional, Tuple

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict, YamlConfigSettingsSource, PydanticBaseSettingsSource


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""

    pass


class Config(BaseSettings):
    """Complete configuration schema for Spoticus with flat structure."""

    model_config = SettingsConfigDict(
        # Load from .env files in order of precedence (lowest to highest)
        env_file=[
            ".env",
            str(Path.home() / ".spoticus" / ".env"),
        ],
        # Load from YAML files in order of precedence (lowest to highest)
        yaml_file=[
            "/etc/spoticus/config.yaml",
            str(Path.home() / ".spoticus" / "config.yaml"),
            str(Path.cwd() / ".spoticus" / "config.yaml"),
        ],
        env_prefix="SPOTICUS_",
        case_sensitive=False,
        extra="ignore",
        env_file_encoding="utf-8",
    )

    # =================================================================
    # Slack
    # =================================================================
    slack_bot_token: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("SLACK_BOT_TOKEN", "SPOTICUS_SLACK_BOT_TOKEN", "slack_bot_token"),
        description="Bot-level OAuth token (xoxb-...)",
    )
    slack_app_token: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("SLACK_APP_TOKEN", "SPOTICUS_SLACK_APP_TOKEN", "slack_app_token"),
        description="App-level token used for Socket Mode (xapp-...)",
    )

    # =================================================================
    # Kubernetes / mapt
    # =================================================================
    kubernetes_context: Optional[str] = Field(
        default=None, description="Kubeconfig context used when not running in-cluster"
    )
    mapt_group: str = Field(default="mapt.redhat.com", description="API group of the mapt resources")
    mapt_version: str = Field(default="v1alpha1", description="API version of the mapt resources")
    mapt_kind_plural: str = Field(default="kinds", description="Plural name of the Kind resource")
    mapt_openshift_plural: str = Field(default="openshifts", description="Plural name of the Openshift resource")

    # =================================================================
    # Logging
    # =================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML support."""
        yaml_settings = YamlConfigSettingsSource(settings_cls)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )

    def require_slack_tokens(self) -> Tuple[str, str]:
        """Return the (bot token, app token) pair.

        Raises:
            ConfigError: If either token is missing or empty
        """
        bot_token = self.slack_bot_token.get_secret_value() if self.slack_bot_token else ""
        app_token = self.slack_app_token.get_secret_value() if self.slack_app_token else ""
        if not bot_token:
            raise ConfigError("SLACK_BOT_TOKEN environment variable is not set.")
        if not app_token:
            raise ConfigError("SLACK_APP_TOKEN environment variable is not set.")
        return bot_token, app_token

    def get_kubernetes_config(self) -> dict:
        """Get Kubernetes configuration."""
        return {
            "context": self.kubernetes_context,
            "group": self.mapt_group,
            "version": self.mapt_version,
            "kind_plural": self.mapt_kind_plural,
            "openshift_plural": self.mapt_openshift_plural,
        }


def load_config() -> Config:
    """
    Load configuration from all sources with proper precedence.

    Examples:
        >>> config = load_config()
        >>> print(config.mapt_group)
        'mapt.redhat.com'

        # export SPOTICUS_KUBERNETES_CONTEXT=mapt-prod
        >>> load_config().kubernetes_context
        'mapt-prod'
    """
    return Config()
