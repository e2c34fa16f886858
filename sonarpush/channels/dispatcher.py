"""Run one quality gate notification cycle."""

import logging
from typing import Mapping, Optional

import httpx

from sonarpush.channels import ChannelPayload, NotificationContext
from sonarpush.channels.slack import dashboard_link, finalize_verdict, format_slack
from sonarpush.client import scoped_client
from sonarpush.config import Settings
from sonarpush.report import STATUS_GREEN, ReportError, parse_report, target_project_name
from sonarpush.resolver import build_environment, resolve_variables
from sonarpush.sonar import fetch_report

logger = logging.getLogger(__name__)


def run_notification_cycle(
    settings: Settings,
    env_vars: Mapping[str, str],
    build_vars: Mapping[str, str],
    client: Optional[httpx.Client] = None,
) -> bool:
    """
    Fetch the quality gate for the configured project and push it to Slack.

    Args:
        settings: Validated notifier settings
        env_vars: Build environment variables
        build_vars: Build parameters, overriding env_vars on collision
        client: Optional HTTP client used for both calls

    Returns:
        False when the report could not be fetched or interpreted, True
        otherwise. A failed Slack push does not fail the cycle.
    """
    environment = build_environment(env_vars, build_vars)

    job_name = resolve_variables(settings.job_name, environment)
    if job_name is None:
        job_name = settings.job_name
    branch = None
    if settings.branch_name:
        branch = resolve_variables(settings.branch_name, environment)
        if branch is None:
            logger.warning("Branch name '%s' unresolved, using no branch suffix", settings.branch_name)
    target_name = target_project_name(job_name, branch)

    try:
        body = fetch_report(
            settings.sonar_url,
            username=settings.username,
            password=settings.password,
            client=client,
        )
        verdict = parse_report(body, target_name)
    except ReportError as e:
        logger.error("Aborting notification for '%s': %s", target_name, e)
        return False

    verdict = finalize_verdict(verdict)
    if verdict.status == STATUS_GREEN:
        logger.info(
            "No failed quality checks found for project '%s', reporting a green build.",
            target_name,
        )

    ctx = NotificationContext(
        job_name=job_name,
        verdict=verdict,
        dashboard_url=dashboard_link(settings.sonar_url, verdict.dashboard_id),
        channel=settings.additional_channel,
    )
    payload = format_slack({"webhook_url": settings.hook}, ctx)

    logger.info("Pushing notification to the Slack channel.")
    _send_notification(payload, client)
    return True


def _send_notification(payload: ChannelPayload, client: Optional[httpx.Client] = None) -> bool:
    """
    Send a single notification via HTTP.

    Failures are logged and reported through the return value, never raised.
    """
    try:
        with scoped_client(client) as http:
            response = http.request(
                method=payload.method,
                url=payload.url,
                headers=payload.headers,
                content=payload.body,
            )
    except httpx.HTTPError as e:
        logger.error(f"Could not push to Slack, got an exception: {e}", exc_info=True)
        return False

    if response.status_code != 200:
        logger.warning(
            f"Could not push to Slack, got status {response.status_code}: "
            f"{response.text[:200]}. Post body: '{payload.body}'"
        )
        return False

    logger.debug("Successfully pushed notification to Slack")
    return True
