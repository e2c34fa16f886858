"""SonarQube resources API client."""

import logging
from typing import Optional

import httpx

from sonarpush.client import basic_auth_header, scoped_client
from sonarpush.report import ReportError

logger = logging.getLogger(__name__)

METRICS = (
    "alert_status",
    "quality_gate_details",
    "new_major_violations",
    "new_critical_violations",
    "new_minor_violations",
)

RESOURCES_PATH = (
    f"/api/resources?metrics={','.join(METRICS)}&includealerts=true&includetrends=true"
)


def fetch_report(
    sonar_url: str,
    username: Optional[str] = None,
    password: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> str:
    """
    GET the quality gate measures of every project on the server.

    Returns the raw response body.

    Raises:
        ReportError: transport failure or any status other than 200.
    """
    url = sonar_url + RESOURCES_PATH
    logger.info("Calling SonarQube on: %s", url)

    try:
        with scoped_client(client) as http:
            resp = http.get(url, headers=basic_auth_header(username, password))
    except httpx.HTTPError as e:
        raise ReportError(f"Could not get Sonar results, exception: '{e}'") from e

    if resp.status_code != 200:
        raise ReportError(
            f"Got a non 200 response from SonarQube. Server responded with "
            f"'{resp.status_code} : {resp.reason_phrase}'",
            status_code=resp.status_code,
        )
    return resp.text
