"""Authentication helpers for the GameCenter login servlet."""

from __future__ import annotations

import logging

from ..utils.http_client import HttpClient

LOGIN_URL = "https://gamecenter.nhl.com/nhlgc/secure/login"


class AuthAPI:
    """Logs the shared session in; the session cookies carry the login afterwards."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def login(self, username: str, password: str, rogers: bool = False) -> None:
        """Set ``rogers`` when logging in with a Rogers internet account."""

        form = {"username": username, "password": password}
        if rogers:
            form["rogers"] = "true"
        try:
            self._client.post(LOGIN_URL, form, operation="login")
        except Exception as exc:
            logging.error("Login request failed: %s", exc)
            raise
        logging.info("Logged in as %s", username)
