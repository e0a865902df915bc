"""
Thin JSON client for the RWA backend.

Every backend response is wrapped in an envelope::

    {"code": 200, "msg": "...", "data": <payload>}

ApiClient unwraps ``data`` and maps failures onto the error taxonomy in
``rwa_ui.errors``. A 401, either as the HTTP status or as the envelope
``code``, raises UnauthorizedError so callers can invalidate the session.
Requests are never retried.
"""

from typing import Any, Mapping

import requests

from rwa_ui.errors import ApiError, UnauthorizedError
from rwa_ui.lib import logs, objects

LOG = logs.logger(__file__)

_SUCCESS_CODES = {0, 200}


class ApiClient:
    """
    JSON client bound to one base URL and, optionally, one session token.

    Attributes:
        base_url: Backend URL including the ``/rwa`` prefix.
        token: Bearer token attached to every request when set.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        session: requests.Session | None = None,
        timeout: float = 15.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token or None
        self.timeout = timeout
        self._session = session or requests.Session()

    @property
    def authenticated(self) -> bool:
        """True when a bearer token will be sent."""
        return self.token is not None

    def headers(self) -> dict[str, str]:
        """Return the request headers, including Authorization when a token is set."""
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.request("POST", path, params=params, body=body)

    def put(self, path: str, body: Any = None) -> Any:
        return self.request("PUT", path, body=body)

    def delete(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("DELETE", path, params=params)

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """
        Send a request and return the unwrapped envelope ``data``.

        Args:
            method: HTTP method.
            path: Path relative to base_url, starting with "/".
            params: Query parameters; None values are dropped.
            body: JSON body for POST/PUT.

        Raises:
            UnauthorizedError: On HTTP 401 or envelope code 401.
            ApiError: On transport failure, any other error status or code,
                or an unparsable body.
        """
        url = f"{self.base_url}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        LOG.info("%s %s params:%s", method, path, query or None)
        if body is not None:
            LOG.debug("%s %s body:%s", method, path, objects.to_json(body))

        try:
            response = self._session.request(
                method,
                url,
                params=query or None,
                json=body,
                headers=self.headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            LOG.error("%s %s failed: %s", method, path, exc)
            raise ApiError(f"Request failed: {exc}", path=path) from exc

        return self._unwrap(response, path)

    def _unwrap(self, response: requests.Response, path: str) -> Any:
        status = response.status_code
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if status == 401:
            LOG.warning("Unauthorized response for %s", path)
            raise UnauthorizedError(
                _error_message(payload, status), status=status, path=path
            )
        if status // 100 != 2:
            LOG.error("API error %s for %s", status, path)
            raise ApiError(_error_message(payload, status), status=status, path=path)
        if not isinstance(payload, dict):
            raise ApiError(
                f"Invalid JSON response: {response.text[:200]!r}",
                status=status,
                path=path,
            )

        code = payload.get("code")
        if code == 401:
            LOG.warning("Unauthorized envelope for %s", path)
            raise UnauthorizedError(
                _error_message(payload, status), status=status, code=code, path=path
            )
        if code is not None and code not in _SUCCESS_CODES:
            LOG.error("API envelope code %s for %s: %s", code, path, payload.get("msg"))
            raise ApiError(
                _error_message(payload, status), status=status, code=code, path=path
            )
        return payload.get("data")


def _error_message(payload: Any, status: int) -> str:
    """Pick the most useful error message out of a backend body."""
    if isinstance(payload, dict):
        message = payload.get("msg") or payload.get("message")
        if message:
            return str(message)
    return f"HTTP {status}"
