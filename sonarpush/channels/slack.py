"""Slack channel adapter."""

import dataclasses
import logging
import posixpath
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from sonarpush.channels import ChannelPayload, NotificationContext
from sonarpush.channels.validate import validate_url
from sonarpush.report import STATUS_ERROR, STATUS_GREEN, STATUS_WARN, Verdict
from sonarpush.schemas.slack import SlackAttachment, SlackField, SlackMessage

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/dashboard/index/"

NO_ISSUES_TEXT = "No Issues found"
ISSUES_TEXT = "Issues found"

STATUS_COLORS = {
    STATUS_GREEN: "good",
    STATUS_WARN: "warning",
    STATUS_ERROR: "danger",
}


def finalize_verdict(verdict: Verdict) -> Verdict:
    """
    Settle the verdict status.

    New violations without a server alert are still a failure.
    """
    if verdict.status_text is None and not verdict.has_violations:
        return dataclasses.replace(verdict, status=STATUS_GREEN, status_text=NO_ISSUES_TEXT)
    if verdict.status_text is None:
        return dataclasses.replace(verdict, status=STATUS_ERROR, status_text=ISSUES_TEXT)
    return verdict


def dashboard_link(sonar_url: str, dashboard_id: str) -> Optional[str]:
    """Deep link to the project dashboard, None when it cannot be built."""
    raw = sonar_url + DASHBOARD_PATH + dashboard_id
    try:
        parts = urlsplit(raw)
        path = posixpath.normpath(parts.path) if parts.path else ""
        link = urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))
    except ValueError:
        link = None

    if link is None or validate_url(link):
        logger.warning("Could not create link to Sonar job with the following content '%s'", raw)
        return None
    return link


def violation_lines(verdict: Verdict) -> list[str]:
    lines = []
    for severity, delta in (
        ("Critical", verdict.critical_delta),
        ("Major", verdict.major_delta),
        ("Minor", verdict.minor_delta),
    ):
        if delta:
            lines.append(f"{severity} Violation added:{delta}")
    return lines


def build_message(ctx: NotificationContext) -> SlackMessage:
    verdict = ctx.verdict

    headline = f"<{ctx.dashboard_url}|*Sonar job*>" if ctx.dashboard_url else "*Sonar job*"
    text = f"{headline}\n*Job:* {ctx.job_name}"
    if verdict.branch:
        text += f"\n*Branch:* {verdict.branch}"

    attachment = SlackAttachment(
        fallback=f"{verdict.status}: {verdict.status_text}",
        color=STATUS_COLORS.get(verdict.status, "danger"),
        title=verdict.status,
        text=verdict.status_text,
        fields=[SlackField(value=line) for line in violation_lines(verdict)],
    )

    return SlackMessage(
        channel=ctx.channel,
        username=ctx.sender_name,
        text=text,
        attachments=[attachment],
    )


def format_slack(config: dict, ctx: NotificationContext) -> ChannelPayload:
    """
    Format a quality gate notification for a Slack webhook.

    Config expects:
        - webhook_url: Slack webhook URL

    ``ctx.verdict`` must already be finalized.
    """
    webhook_url = config.get("webhook_url", "")
    message = build_message(ctx)

    return ChannelPayload(
        method="POST",
        url=webhook_url,
        headers={"Content-Type": "application/json"},
        body=message.model_dump_json(exclude_none=True),
    )


def parse_slack_message(body: str) -> SlackMessage:
    return SlackMessage.model_validate_json(body)
