"""Push SonarQube quality gate results to a Slack channel."""

__version__ = "0.1.0"
