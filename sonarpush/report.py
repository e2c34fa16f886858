"""Interpret a SonarQube resources report as a quality gate verdict."""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from sonarpush.schemas.report import (
    ALERT_STATUS,
    NEW_CRITICAL_VIOLATIONS,
    NEW_MAJOR_VIOLATIONS,
    NEW_MINOR_VIOLATIONS,
    ReportEntry,
    report_adapter,
)

logger = logging.getLogger(__name__)

STATUS_GREEN = "GREEN"
STATUS_WARN = "WARN"
STATUS_ERROR = "ERROR"

_ALERT_LEVELS = {STATUS_WARN, STATUS_ERROR}


class ReportError(Exception):
    """The quality report could not be fetched or interpreted."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class Verdict:
    """Quality gate outcome for one project."""
    dashboard_id: str
    branch: Optional[str] = None
    status: Optional[str] = None  # None until finalized
    status_text: Optional[str] = None
    major_delta: Optional[str] = None
    minor_delta: Optional[str] = None
    critical_delta: Optional[str] = None

    @property
    def has_violations(self) -> bool:
        return any((self.major_delta, self.minor_delta, self.critical_delta))


def target_project_name(job_name: str, branch: Optional[str]) -> str:
    """Sonar names branch analyses '<job> <branch>'."""
    name = job_name
    if branch:
        name += " " + branch
    return name.strip()


def parse_entries(body: str) -> list[ReportEntry]:
    try:
        return report_adapter.validate_json(body)
    except ValidationError as e:
        raise ReportError(
            f"Could not parse the response from Sonar: {e.error_count()} error(s), "
            f"body '{body[:200]}'"
        ) from e


def find_entry(entries: list[ReportEntry], target_name: str) -> ReportEntry:
    for entry in entries:
        if entry.name == target_name:
            return entry
    raise ReportError(f"No Sonar project named '{target_name}' in the report")


def _delta(entry: ReportEntry, key: str) -> Optional[str]:
    measure = entry.measure(key)
    if measure is None or measure.delta is None or measure.delta == "0":
        return None
    return measure.delta


def verdict_from_entry(entry: ReportEntry) -> Verdict:
    verdict = Verdict(dashboard_id=entry.id, branch=entry.branch)

    alert = entry.measure(ALERT_STATUS)
    if alert is not None and alert.alert_level:
        level = alert.alert_level.upper()
        if level in _ALERT_LEVELS:
            verdict.status = level
            verdict.status_text = alert.alert_text or f"Quality gate {level}"

    verdict.major_delta = _delta(entry, NEW_MAJOR_VIOLATIONS)
    verdict.minor_delta = _delta(entry, NEW_MINOR_VIOLATIONS)
    verdict.critical_delta = _delta(entry, NEW_CRITICAL_VIOLATIONS)
    return verdict


def parse_report(body: str, target_name: str) -> Verdict:
    """
    Parse a /api/resources response and build the verdict for ``target_name``.

    Raises:
        ReportError: the body is not a JSON array of projects, or no project
            carries exactly the target name.
    """
    entry = find_entry(parse_entries(body), target_name)
    logger.debug("Matched Sonar project '%s' (id=%s)", entry.name, entry.id)
    return verdict_from_entry(entry)
