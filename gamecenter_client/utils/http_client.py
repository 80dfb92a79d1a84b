"""Shared HTTP helpers for GameCenter servlets and CDN resources."""

from __future__ import annotations

import logging
import secrets
from typing import Any, Dict, Optional

import requests

from .errors import AuthenticationError, TransportError

# The User-Agent influences which master playlist the portal hands out, so
# changing it also changes the available variants.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (iPad; CPU OS 8_1 like Mac OS X) AppleWebKit/600.1.4 "
    "(KHTML, like Gecko) Version/8.0 Mobile/12B410 Safari/600.1.4"
)

ERR_200_EXPECTED = "Expected a status code of 200"


class HttpClient:
    """Cookie-backed session used for every portal and CDN request."""

    def __init__(self, timeout: int = 10, user_agent: str = DEFAULT_USER_AGENT) -> None:
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({"User-Agent": user_agent})
        self.plid = secrets.token_hex(16)

    def get(self, url: str, params: Optional[Dict[str, Any]] = None, operation: str = "GET") -> bytes:
        """GET ``url`` and return the response body."""

        return self._request(operation, "GET", url, params=params)

    def post(self, url: str, form: Optional[Dict[str, Any]] = None, operation: str = "POST") -> bytes:
        """POST ``form`` as application/x-www-form-urlencoded and return the body."""

        return self._request(operation, "POST", url, data=form)

    def _request(self, operation: str, method: str, url: str, **kwargs: Any) -> bytes:
        logging.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise TransportError(operation, str(exc), 0, url) from exc

        if response.status_code in {401, 403}:
            raise AuthenticationError(operation, ERR_200_EXPECTED, response.status_code, url)
        if response.status_code != 200:
            raise TransportError(operation, ERR_200_EXPECTED, response.status_code, url)
        return response.content

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
