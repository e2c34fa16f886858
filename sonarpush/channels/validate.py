"""Config validation for the Slack hook and the SonarQube server."""

from typing import Optional
from urllib.parse import urlparse


def validate_url(value: Optional[str]) -> Optional[str]:
    """
    Validate a webhook or server URL.
    Returns None if valid, or an error message string if invalid.
    """
    if not isinstance(value, str) or not value:
        return "Please specify a valid URL"
    try:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return "Please specify a valid URL."
    except ValueError:
        return "Please specify a valid URL."
    return None


def validate_job_name(value: Optional[str]) -> Optional[str]:
    if not value:
        return "Please enter a Sonar job name."
    return None


def validate_config(config: dict) -> Optional[str]:
    """
    Validate a notifier config.
    Returns None if valid, or an error message string naming the bad field.
    """
    validators = {
        "hook": validate_url,
        "sonar_url": validate_url,
        "job_name": validate_job_name,
    }
    for field, validator in validators.items():
        err = validator(config.get(field))
        if err:
            return f"{field}: {err}"
    return None
