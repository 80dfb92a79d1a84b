"""Exception hierarchy shared by the GameCenter APIs and playlist helpers."""

from __future__ import annotations


class GameCenterError(Exception):
    """Base error carrying the name of the operation that failed."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(message)
        self.operation = operation
        self.message = message

    def __str__(self) -> str:
        return f"{self.operation}: {self.message}"


class TransportError(GameCenterError):
    """Raised on network failures and non-200 responses."""

    def __init__(self, operation: str, message: str, status_code: int = 0, location: str = "") -> None:
        super().__init__(operation, message)
        self.status_code = status_code
        self.location = location

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.operation}: {self.message} (status: {self.status_code} - location: {self.location})"
        return f"{self.operation}: {self.message} (location: {self.location})"


class AuthenticationError(TransportError):
    """Raised when the portal rejects the session (401/403)."""


class ManifestDecodeError(GameCenterError):
    """Raised when playlist bytes are not a well-formed m3u8 document."""


class UnsupportedFormatError(GameCenterError):
    """Raised when a playlist is not of the kind an operation requires."""


class ResponseDecodeError(GameCenterError):
    """Raised when an XML or JSON metadata response cannot be parsed."""
