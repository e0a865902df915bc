"""
Environment-driven configuration for the RWA Finance UI.

Values are read once at import time.
"""

import os

from rwa_ui.lib import logs

LOG = logs.logger(__file__)


def env_int(name: str, default: int) -> int:
    """Return the variable as an int, falling back to ``default`` if unset or invalid."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        LOG.warning("Invalid integer for %s: %r, using %s", name, value, default)
        return default


API_BASE_URL = os.getenv("RWA_UI_API_BASE_URL", "http://localhost:8888/rwa").rstrip("/")
SERVICE_KIND = os.getenv("RWA_UI_SERVICE", "demo").lower()
HTTP_TIMEOUT = env_int("RWA_UI_HTTP_TIMEOUT", 15)
MARKET_CACHE_TTL = env_int("RWA_UI_MARKET_CACHE_TTL", 30)
PAGE_SIZE = env_int("RWA_UI_PAGE_SIZE", 10)
APP_PORT = env_int("RWA_UI_APP_PORT", 8000)

APP_TITLE = "RWA Invoice Finance"
APP_SUBTITLE = "Tokenized invoice financing for enterprises and investors."
