from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

from sonarpush.channels.validate import validate_config


class ConfigError(ValueError):
    """Raised when the notifier configuration is unusable."""


class Settings(BaseSettings):
    # Slack incoming webhook
    hook: str = ""

    # SonarQube server, without trailing slash
    sonar_url: str = ""

    # Sonar project name; both may embed ${VAR} build variables
    job_name: str = ""
    branch_name: str = ""

    # Channel override for the webhook's default channel
    additional_channel: Optional[str] = None

    # SonarQube basic auth
    username: Optional[str] = None
    password: Optional[str] = None

    model_config = {"env_prefix": "SSP_", "env_file": ".env", "extra": "ignore"}

    @field_validator("hook", "job_name", "branch_name", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("sonar_url", mode="before")
    @classmethod
    def _strip_url(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if v.endswith("/"):
                v = v[:-1]
        return v

    @field_validator("additional_channel", "username", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


def validate_settings(settings: Settings) -> Settings:
    err = validate_config(settings.model_dump())
    if err:
        raise ConfigError(err)
    return settings


def load_settings(**overrides) -> Settings:
    """Build settings from the environment (and .env), then validate them."""
    return validate_settings(Settings(**overrides))
