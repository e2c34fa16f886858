from __future__ import annotations

import pytest

from helpers import HOOK_URL, SONAR_URL
from sonarpush.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        hook=HOOK_URL,
        sonar_url=SONAR_URL,
        job_name="proj",
        branch_name="${BRANCH}",
    )


@pytest.fixture
def build_vars() -> dict[str, str]:
    return {"BRANCH": "branchX"}
