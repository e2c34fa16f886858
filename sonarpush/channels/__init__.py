"""Base types for notification channel adapters."""

from dataclasses import dataclass
from typing import Optional

from sonarpush.report import Verdict


@dataclass
class ChannelPayload:
    """Represents the HTTP request payload for a notification channel."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # JSON string


@dataclass
class NotificationContext:
    """Everything one notification cycle knows about the evaluated project."""
    job_name: str
    verdict: Verdict
    dashboard_url: Optional[str] = None
    channel: Optional[str] = None
    sender_name: str = "Sonar Slack Pusher"
