"""API layer for login, games, highlights, and playlists."""

from .auth_api import AuthAPI
from .games_api import GamesAPI
from .highlights_api import HighlightsAPI
from .playlist_api import PlaylistAPI

__all__ = ["AuthAPI", "GamesAPI", "HighlightsAPI", "PlaylistAPI"]
