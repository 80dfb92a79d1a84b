"""API client for the games list and game info servlets."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, Optional

from pydantic import ValidationError

from ..models import GameDetails, GamesList
from ..utils.errors import ResponseDecodeError
from ..utils.http_client import HttpClient
from ..utils.url_utils import normalize_publish_point, pad_game_id

GAMES_LIST_URL = "https://gamecenter.nhl.com/nhlgc/servlets/games"
GAME_INFO_URL = "https://gamecenter.nhl.com/nhlgc/servlets/game"

ERR_XML_UNMARSHAL = "XML unmarshal: "

# XML element -> GameDetails field
GAME_FIELDS: Dict[str, str] = {
    "gid": "gid",
    "season": "season",
    "type": "type",
    "id": "id",
    "date": "date",
    "gameTimeGMT": "game_start_time",
    "gameEndTimeGMT": "game_end_time",
    "homeTeam": "home_team",
    "awayTeam": "away_team",
    "homeGoals": "home_goals",
    "awayGoals": "away_goals",
    "blocked": "blocked",
    "gameState": "game_state",
    "result": "result",
    "isLive": "is_live",
    "program/publishPoint": "publish_point",
}


def parse_xml(body: bytes, operation: str) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as exc:
        raise ResponseDecodeError(operation, ERR_XML_UNMARSHAL + str(exc)) from exc


def game_from_element(element: Optional[ET.Element], operation: str) -> GameDetails:
    values = {}
    if element is not None:
        for path, field in GAME_FIELDS.items():
            text = element.findtext(path)
            if text is not None:
                values[field] = text.strip()
    try:
        return GameDetails(**values)
    except ValidationError as exc:
        raise ResponseDecodeError(operation, ERR_XML_UNMARSHAL + str(exc)) from exc


class GamesAPI:
    """Lists games and fetches details for a single game."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def get_recent_games(self) -> GamesList:
        """Recent and upcoming games."""

        return self._get_games("get_recent_games", today_only=False)

    def get_todays_games(self) -> GamesList:
        return self._get_games("get_todays_games", today_only=True)

    def _get_games(self, operation: str, today_only: bool) -> GamesList:
        form = {"format": "xml", "isFlex": "true"}
        if today_only:
            form["app"] = "true"
        try:
            body = self._client.post(GAMES_LIST_URL, form, operation=operation)
        except Exception as exc:
            logging.error("Failed to fetch games list: %s", exc)
            raise

        root = parse_xml(body, operation)
        games = []
        for element in root.findall("games/game"):
            game = game_from_element(element, operation)
            update = {"id": pad_game_id(game.id)}
            if game.publish_point:
                update["publish_point"] = normalize_publish_point(game.publish_point)
            games.append(game.model_copy(update=update))
        logging.debug("Parsed %s games", len(games))
        return GamesList(games=games)

    def get_game_details(self, season: str, game_id: str) -> GameDetails:
        operation = "get_game_details"
        form = {
            "app": "true",
            "isFlex": "true",
            "season": season,
            "gid": pad_game_id(game_id),
        }
        try:
            body = self._client.post(GAME_INFO_URL, form, operation=operation)
        except Exception as exc:
            logging.error("Failed to fetch game %s/%s: %s", season, game_id, exc)
            raise

        root = parse_xml(body, operation)
        return game_from_element(root.find("game"), operation)
