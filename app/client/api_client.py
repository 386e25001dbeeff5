"""
Equipment API client — wraps the four REST calls for the terminal client.

Every failure surfaces as ``ApiError`` with a message suitable for
showing to the user verbatim:

  - non-2xx responses:  ``Request failed (<status>): <server message>``
  - unreachable server: a hint that the backend may be down
  - non-JSON success bodies where JSON is expected

Configuration is read from the environment unless passed explicitly:
    - ``EQUIPMENT_API_BASE_URL``: e.g. ``http://localhost:5000/api``
    - ``EQUIPMENT_API_TIMEOUT``:  request timeout in seconds
"""

import json
import logging
import os
from typing import Any
from urllib.parse import quote

import urllib3

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"
DEFAULT_TIMEOUT = 10.0

# Fallback when the server sends neither a message nor a reason phrase.
_GENERIC_FAILURE = "Request failed"


class ApiError(Exception):
    """
    A request to the equipment API failed.

    ``status`` is the HTTP status code, or None when no response was
    received (network error).
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class EquipmentApiClient:
    """
    Client for the equipment REST API.

    Usage::

        client = EquipmentApiClient()
        records = client.fetch_equipment()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        if base_url is None:
            base_url = os.environ.get("EQUIPMENT_API_BASE_URL", DEFAULT_BASE_URL)
        if timeout is None:
            timeout = float(os.environ.get("EQUIPMENT_API_TIMEOUT", DEFAULT_TIMEOUT))

        self.base_url: str = base_url.rstrip("/")
        self.timeout: float = timeout

        # One attempt per user action: no retries, no redirects.
        self._http = urllib3.PoolManager(retries=False)

    # =================================================================
    # Public API
    # =================================================================

    def fetch_equipment(self) -> list[dict[str, Any]]:
        """Return the full equipment list."""
        return self._request_json("GET", "/equipment")

    def create_equipment(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create a record and return it with its assigned id."""
        return self._request_json("POST", "/equipment", payload)

    def update_equipment(
        self, equipment_id: int, payload: dict[str, Any]
    ) -> dict[str, Any]:
        """Overwrite a record and return the updated version."""
        return self._request_json(
            "PUT", f"/equipment/{quote(str(equipment_id), safe='')}", payload
        )

    def delete_equipment(self, equipment_id: int) -> None:
        """Delete a record.  The server answers 204 with no body."""
        self._request("DELETE", f"/equipment/{quote(str(equipment_id), safe='')}")

    # =================================================================
    # HTTP transport
    # =================================================================

    def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> urllib3.BaseHTTPResponse:
        """
        Send one request and raise ``ApiError`` unless it succeeded.

        Returns:
            The 2xx response.
        """
        url = f"{self.base_url}{path}"
        headers: dict[str, str] = {}
        body = None
        if payload is not None:
            headers["Content-Type"] = "application/json"
            body = json.dumps(payload).encode("utf-8")

        try:
            response = self._http.request(
                method,
                url,
                body=body,
                headers=headers,
                timeout=self.timeout,
            )
        except urllib3.exceptions.HTTPError as exc:
            logger.warning("Could not reach %s %s: %s", method, url, exc)
            raise ApiError(
                f"Unable to reach the server at {self.base_url}. "
                "The backend may be down."
            ) from exc

        if not 200 <= response.status < 300:
            message = _read_error_message(response)
            logger.debug("%s %s returned %d: %s", method, url, response.status, message)
            raise ApiError(
                f"Request failed ({response.status}): {message}",
                status=response.status,
            )

        return response

    def _request_json(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and decode the JSON success body."""
        response = self._request(method, path, payload)

        content_type = response.headers.get("Content-Type", "")
        if "application/json" not in content_type:
            raise ApiError(
                "Invalid server response (expected JSON).", status=response.status
            )

        try:
            return json.loads(response.data or b"")
        except ValueError as exc:
            raise ApiError(
                "Invalid server response (expected JSON).", status=response.status
            ) from exc


def _read_error_message(response: urllib3.BaseHTTPResponse) -> str:
    """
    Extract a human-readable message from an error response.

    Prefers the JSON ``message`` field, then the raw JSON, then the
    body text, then the reason phrase.
    """
    fallback = response.reason or _GENERIC_FAILURE
    content_type = response.headers.get("Content-Type", "")

    if "application/json" in content_type:
        try:
            data = json.loads(response.data or b"")
        except ValueError:
            return fallback
        if isinstance(data, dict) and isinstance(data.get("message"), str):
            return data["message"]
        return json.dumps(data)

    text = (response.data or b"").decode("utf-8", errors="replace").strip()
    return text or fallback
