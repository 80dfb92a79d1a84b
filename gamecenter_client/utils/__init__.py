"""Utility helpers for HTTP, errors, and URLs."""

from .errors import (
    AuthenticationError,
    GameCenterError,
    ManifestDecodeError,
    ResponseDecodeError,
    TransportError,
    UnsupportedFormatError,
)
from .http_client import HttpClient
from .url_utils import join_directory, strip_quotes

__all__ = [
    "AuthenticationError",
    "GameCenterError",
    "HttpClient",
    "ManifestDecodeError",
    "ResponseDecodeError",
    "TransportError",
    "UnsupportedFormatError",
    "join_directory",
    "strip_quotes",
]
