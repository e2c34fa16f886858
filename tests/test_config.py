"""Tests for notifier settings and their validation."""

from __future__ import annotations

import pytest

from helpers import HOOK_URL, SONAR_URL
from sonarpush.channels.validate import validate_config, validate_job_name, validate_url
from sonarpush.config import ConfigError, Settings, load_settings, validate_settings


class TestSettings:
    def test_values_trimmed(self) -> None:
        settings = Settings(
            _env_file=None,
            hook=f"  {HOOK_URL} ",
            sonar_url=f" {SONAR_URL}/ ",
            job_name=" proj ",
            branch_name=" ${BRANCH} ",
            additional_channel="  ",
        )
        assert settings.hook == HOOK_URL
        assert settings.sonar_url == SONAR_URL
        assert settings.job_name == "proj"
        assert settings.branch_name == "${BRANCH}"
        assert settings.additional_channel is None

    def test_read_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SSP_HOOK", HOOK_URL)
        monkeypatch.setenv("SSP_SONAR_URL", SONAR_URL)
        monkeypatch.setenv("SSP_JOB_NAME", "proj")
        monkeypatch.setenv("SSP_USERNAME", "admin")
        settings = load_settings(_env_file=None)
        assert settings.job_name == "proj"
        assert settings.username == "admin"


class TestValidation:
    def test_valid(self, settings: Settings) -> None:
        assert validate_settings(settings) is settings

    @pytest.mark.parametrize("field", ["hook", "sonar_url"])
    @pytest.mark.parametrize("value", ["", "not a url", "ftp://sonar.example.com"])
    def test_bad_url(self, settings: Settings, field: str, value: str) -> None:
        setattr(settings, field, value)
        with pytest.raises(ConfigError, match=field):
            validate_settings(settings)

    def test_missing_job_name(self, settings: Settings) -> None:
        settings.job_name = ""
        with pytest.raises(ConfigError, match="Please enter a Sonar job name."):
            validate_settings(settings)

    def test_helpers(self) -> None:
        assert validate_url(SONAR_URL) is None
        assert validate_url(None) == "Please specify a valid URL"
        assert validate_job_name("proj") is None
        assert validate_config({"hook": HOOK_URL, "sonar_url": SONAR_URL, "job_name": "p"}) is None
