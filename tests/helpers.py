"""Sonar report builders and a fake HTTP server for tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx

SONAR_URL = "https://sonar.example.com"
HOOK_URL = "https://hooks.slack.com/services/T000/B000/XXX"


def measure(key: str, **fields: Any) -> dict[str, Any]:
    return {"key": key, **fields}


def entry(name: str, id: str = "42", branch: str | None = None, msr: list | None = None) -> dict:
    data: dict[str, Any] = {"id": id, "key": f"org:{name}", "name": name, "msr": msr or []}
    if branch is not None:
        data["branch"] = branch
    return data


def report_body(*entries: dict) -> str:
    return json.dumps(list(entries))


class FakeServer:
    """Routes requests to canned Sonar/Slack responses and records them."""

    def __init__(
        self,
        sonar: Callable[[httpx.Request], httpx.Response],
        slack: Callable[[httpx.Request], httpx.Response] | None = None,
    ):
        self.sonar = sonar
        self.slack = slack or (lambda request: httpx.Response(200, text="ok"))
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "hooks.slack.com":
            return self.slack(request)
        return self.sonar(request)

    @property
    def slack_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == "hooks.slack.com"]

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))
