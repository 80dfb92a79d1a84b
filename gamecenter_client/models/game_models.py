"""Models describing games, highlights and publish points."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, field_validator


class GameDetails(BaseModel):
    """A game as returned by the games list and game info servlets."""

    gid: str = ""
    season: str = ""
    type: str = ""
    id: str = ""
    date: Optional[datetime] = None
    game_start_time: Optional[datetime] = None
    game_end_time: Optional[datetime] = None
    home_team: str = ""
    away_team: str = ""
    home_goals: int = 0
    away_goals: int = 0
    blocked: bool = False
    game_state: str = ""
    result: str = ""
    is_live: bool = False
    publish_point: str = ""

    @field_validator("date", "game_start_time", "game_end_time", mode="before")
    @classmethod
    def _parse_gmt(cls, value):
        # The servlets send GMT timestamps without a zone designator.
        if value is None or value == "":
            return None
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        if isinstance(value, datetime) and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("home_goals", "away_goals", mode="before")
    @classmethod
    def _parse_optional_count(cls, value):
        if value is None or value == "":
            return 0
        return value

    @field_validator("blocked", "is_live", mode="before")
    @classmethod
    def _parse_flag(cls, value):
        if value is None or value == "":
            return False
        return value


class GamesList(BaseModel):
    games: List[GameDetails]


class GameHighlight(BaseModel):
    """A highlight clip and the playlist it can be streamed from."""

    id: str
    publish_point: str = ""


GameHighlights = Dict[str, GameHighlight]
