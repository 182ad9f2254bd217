"""
HTTP client for the legal platform REST API.

Every call goes through ``ApiClient.request`` which:
- attaches ``Authorization: Bearer <token>`` when a token is available
- unwraps the ``{success, message, data}`` envelope
- maps 401 to ambient session invalidation (never retried)
- maps other failures to ApiError / NoResponseError with a displayable message
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import requests

from legal_clinic.exceptions import ApiError, NoResponseError, UnauthorizedError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred"


class ApiClient:
    def __init__(
        self,
        base_url: str,
        token_provider: Callable[[], str | None] | None = None,
        on_unauthorized: Callable[[], None] | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_provider = token_provider
        self.on_unauthorized = on_unauthorized
        self.timeout = timeout
        self.http = session or requests.Session()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self.token_provider() if self.token_provider else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        invalidate_on_401: bool = True,
    ) -> Any:
        """
        Perform a request and return the unwrapped payload.

        ``invalidate_on_401=False`` is for the sign-in calls themselves, where
        a 401 means wrong credentials rather than a stale session.
        """
        url = self.url_for(path)
        try:
            resp = self.http.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.warning("No response for %s %s: %s", method, url, exc)
            raise NoResponseError() from exc
        except requests.RequestException as exc:
            # Truncated body, redirect loop, malformed URL...
            logger.warning("Request %s %s failed: %s", method, url, exc)
            raise ApiError(DEFAULT_ERROR_MESSAGE) from exc

        if resp.status_code == 401:
            if invalidate_on_401 and self.on_unauthorized:
                logger.info("%s %s rejected the credential, invalidating session", method, url)
                self.on_unauthorized()
            raise UnauthorizedError(_message_of(resp) or "Unauthorized")

        if resp.status_code >= 400:
            raise ApiError(_message_of(resp) or DEFAULT_ERROR_MESSAGE, status_code=resp.status_code)

        return _unwrap(resp)

    def get(self, path: str, **kwargs: Any) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> Any:
        return self.request("POST", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> Any:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> Any:
        return self.request("DELETE", path, **kwargs)


def _body(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return None


def _message_of(resp: requests.Response) -> str | None:
    body = _body(resp)
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return str(message)
    return None


def _unwrap(resp: requests.Response) -> Any:
    body = _body(resp)
    if isinstance(body, dict) and "success" in body:
        if not body["success"]:
            raise ApiError(body.get("message") or DEFAULT_ERROR_MESSAGE, status_code=resp.status_code)
        return body.get("data")
    return body
