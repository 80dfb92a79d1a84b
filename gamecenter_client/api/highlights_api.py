"""API client for per-game highlight clips."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from ..models import GameHighlight, GameHighlights
from ..utils.errors import ResponseDecodeError
from ..utils.http_client import HttpClient
from ..utils.url_utils import pad_game_id
from .constants import SEASON_TYPE_REGULAR

GAME_HIGHLIGHTS_URL = "http://video.nhl.com/videocenter/servlets/playlist"

ERR_JSON_UNMARSHAL = "JSON unmarshal: "

HIGHLIGHT_SUFFIXES = {
    "-X-h": "home",
    "-X-a": "away",
    "-X-fr": "french",
}


class HighlightsAPI:
    """Looks up the home, away and French highlight clips of a game."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def get_game_highlights(self, season: str, game_id: str) -> GameHighlights:
        operation = "get_game_highlights"
        base_id = season + SEASON_TYPE_REGULAR + pad_game_id(game_id)
        params = {
            "format": "json",
            "ids": ",".join(base_id + suffix for suffix in HIGHLIGHT_SUFFIXES),
        }
        try:
            body = self._client.get(GAME_HIGHLIGHTS_URL, params, operation=operation)
        except Exception as exc:
            logging.error("Failed to fetch highlights for %s: %s", base_id, exc)
            raise

        body = body.strip()
        highlights: GameHighlights = {}
        if not body:
            return highlights

        try:
            entries = [
                GameHighlight(id=item.get("id", ""), publish_point=item.get("publishPoint") or "")
                for item in json.loads(body)
            ]
        except (ValueError, AttributeError, TypeError, ValidationError) as exc:
            raise ResponseDecodeError(operation, ERR_JSON_UNMARSHAL + str(exc)) from exc

        for entry in entries:
            for suffix, label in HIGHLIGHT_SUFFIXES.items():
                if entry.id == base_id + suffix:
                    highlights[label] = entry
        return highlights
