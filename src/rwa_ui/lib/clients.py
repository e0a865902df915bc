"""
Client factories for the RWA backend.

A single requests.Session is shared per process so connections are pooled.
ApiClient instances are cheap and built per call because each browser
session carries its own token.

Environment variables used:
- RWA_UI_API_BASE_URL: Backend base URL including the /rwa prefix
- RWA_UI_HTTP_TIMEOUT: Request timeout in seconds
"""

import functools

import requests

from rwa_ui import settings
from rwa_ui.lib.api import ApiClient


@functools.cache
def http_session() -> requests.Session:
    """Return the process-wide HTTP session."""
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    return session


def api_client(token: str | None = None) -> ApiClient:
    """
    Return an ApiClient for the configured backend.

    Args:
        token: Session token to send as a bearer credential, if any.
    """
    return ApiClient(
        settings.API_BASE_URL,
        token=token,
        session=http_session(),
        timeout=settings.HTTP_TIMEOUT,
    )
