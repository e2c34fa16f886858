"""HTTP client helpers shared by the Sonar fetch and the Slack push."""

import base64
from contextlib import contextmanager
from typing import Iterator, Optional

import httpx


def basic_auth_header(username: Optional[str], password: Optional[str]) -> dict[str, str]:
    """Authorization header for the Sonar API, empty when no username is set."""
    if not username:
        return {}
    token = base64.b64encode(f"{username}:{password or ''}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


def http_client(
    timeout: float = 15,
    follow_redirects: bool = True,
    **kwargs,
) -> httpx.Client:
    return httpx.Client(
        timeout=timeout,
        follow_redirects=follow_redirects,
        **kwargs,
    )


@contextmanager
def scoped_client(client: Optional[httpx.Client] = None) -> Iterator[httpx.Client]:
    """
    Yield ``client`` untouched, or a fresh client closed on exit.

    A caller-owned client stays open; it is the caller's to release.
    """
    if client is not None:
        yield client
        return
    with http_client() as owned:
        yield owned
