"""Client library for the NHL GameCenter video portal."""

from .api import AuthAPI, GamesAPI, HighlightsAPI, PlaylistAPI
from .streaming import DecryptionParameterBuilder, ManifestParser, PlaylistResolver
from .utils import HttpClient

__version__ = "0.1.0"

__all__ = [
    "AuthAPI",
    "DecryptionParameterBuilder",
    "GamesAPI",
    "HighlightsAPI",
    "HttpClient",
    "ManifestParser",
    "PlaylistAPI",
    "PlaylistResolver",
]
