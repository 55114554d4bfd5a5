"""
HTTP client for the renthouse REST API.

Every endpoint answers with the same envelope::

    {"success": true, "message": "...", "data": ...}

``ApiClient`` attaches the bearer token of the logged-in session, unwraps
that envelope into an ``ApiResponse`` and turns transport or HTTP failures
into ``ApiError``. A 401 becomes ``ApiUnauthorized`` so the app can drop the
session and send the browser back to the login page.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests
from flask import has_request_context, session

logger = logging.getLogger(__name__)

TOKEN_KEY = "auth_token"

DEFAULT_MESSAGES = {
    400: "Invalid request.",
    403: "You do not have permission to perform this action.",
    404: "The requested resource was not found.",
    409: "The request conflicts with the current state of the resource.",
}
SERVER_ERROR_MESSAGE = "Server error. Please try again later."
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection."


class ApiError(Exception):
    """Raised when the API cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_network_error(self) -> bool:
        return self.status_code is None


class ApiUnauthorized(ApiError):
    """The token is missing, expired or rejected (HTTP 401)."""

    def __init__(self, message: str = "Your session has expired. Please log in again."):
        super().__init__(message, 401)


@dataclass
class ApiResponse:
    success: bool
    message: str = ""
    data: Any = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ApiResponse":
        if not isinstance(payload, dict) or "success" not in payload:
            # Endpoints that answer with a bare body are treated as successful.
            return cls(success=True, message="", data=payload)
        return cls(
            success=bool(payload.get("success")),
            message=payload.get("message") or "",
            data=payload.get("data"),
        )

    def convert(self, factory: Callable[[dict], Any], many: bool = False) -> "ApiResponse":
        """Return a copy whose ``data`` is built with ``factory``."""
        if self.data is None:
            return self
        if many:
            data = [factory(item) for item in self.data]
        else:
            data = factory(self.data)
        return ApiResponse(self.success, self.message, data)


def default_message(status_code: int) -> str:
    if status_code >= 500:
        return SERVER_ERROR_MESSAGE
    return DEFAULT_MESSAGES.get(status_code, f"Request failed with status {status_code}.")


class ApiClient:
    """Thin wrapper around a ``requests.Session`` bound to the API base URL."""

    def __init__(self, app=None):
        self.base_url = None
        self.timeout = 10
        self.http = requests.Session()
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.base_url = app.config["API_BASE_URL"].rstrip("/")
        self.timeout = app.config.get("API_TIMEOUT", 10)
        app.extensions["api_client"] = self

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def auth_headers(self) -> dict:
        if not has_request_context():
            return {}
        token = session.get(TOKEN_KEY)
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    def request(self, method: str, path: str, params=None, json=None, files=None,
                token: Optional[str] = None) -> ApiResponse:
        url = self.url(path)
        headers = {"Authorization": f"Bearer {token}"} if token else self.auth_headers()
        if files is None:
            headers["Content-Type"] = "application/json"

        if params:
            params = {k: v for k, v in params.items() if v is not None and v != ""}

        logger.debug("API %s %s params=%s", method, url, params)

        try:
            resp = self.http.request(
                method,
                url,
                params=params or None,
                json=json,
                files=files,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("API %s %s failed: %s", method, url, exc)
            raise ApiError(NETWORK_ERROR_MESSAGE) from exc

        logger.debug("API %s %s -> %s", method, url, resp.status_code)

        if resp.status_code == 401:
            raise ApiUnauthorized()

        payload = self._decode(resp)

        if not resp.ok:
            message = payload.get("message") if isinstance(payload, dict) else None
            message = message or default_message(resp.status_code)
            logger.warning("API %s %s returned %s: %s", method, url, resp.status_code, message)
            raise ApiError(message, resp.status_code)

        return ApiResponse.from_payload(payload)

    @staticmethod
    def _decode(resp):
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    def get(self, path, params=None):
        return self.request("GET", path, params=params)

    def post(self, path, json=None, params=None, files=None):
        return self.request("POST", path, params=params, json=json, files=files)

    def put(self, path, json=None, params=None):
        return self.request("PUT", path, params=params, json=json)

    def delete(self, path, params=None):
        return self.request("DELETE", path, params=params)
