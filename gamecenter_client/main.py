from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .api.auth_api import AuthAPI
from .api.constants import STREAM_SOURCES, STREAM_TYPE_ARCHIVE, STREAM_TYPES
from .api.games_api import GamesAPI
from .api.highlights_api import HighlightsAPI
from .api.playlist_api import PlaylistAPI
from .models import DecryptionParameters, GameDetails, MediaPlaylist, StreamDescriptor
from .utils.errors import GameCenterError
from .utils.http_client import HttpClient

load_dotenv()


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_int(name: str) -> int | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _env_bool(name: str) -> bool:
    value = _env_str(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse NHL GameCenter games and resolve their HLS streams.")
    parser.add_argument("--username", default=_env_str("GC_USERNAME"), help="GameCenter account name")
    parser.add_argument("--password", default=_env_str("GC_PASSWORD"), help="GameCenter password")
    parser.add_argument(
        "--rogers",
        action="store_true",
        default=_env_bool("GC_ROGERS"),
        help="Log in with a Rogers internet account",
    )
    parser.add_argument("--season", default=_env_str("GC_SEASON"), help="Season, e.g. 2014")
    parser.add_argument("--game-id", default=_env_str("GC_GAME_ID"), help="Game id within the season")
    parser.add_argument(
        "--stream-type",
        choices=STREAM_TYPES,
        default=_env_str("GC_STREAM_TYPE") or STREAM_TYPE_ARCHIVE,
        help="Publish point stream type",
    )
    parser.add_argument(
        "--stream-source",
        choices=sorted(STREAM_SOURCES),
        default=_env_str("GC_STREAM_SOURCE") or "home",
        help="Home, away or French broadcast",
    )
    parser.add_argument("--list-games", action="store_true", help="List recent and upcoming games")
    parser.add_argument("--today", action="store_true", help="With --list-games, only list today's games")
    parser.add_argument("--game-details", action="store_true", help="Show details for --season/--game-id")
    parser.add_argument("--highlights", action="store_true", help="Show highlight playlists for the game")
    parser.add_argument("--list-streams", action="store_true", help="List the game's stream variants")
    parser.add_argument(
        "--decryption-params",
        action="store_true",
        help="Print per-segment decryption parameters for the selected stream",
    )
    parser.add_argument(
        "--bandwidth",
        type=int,
        default=None,
        help="Select the variant with this bandwidth instead of the highest one",
    )
    parser.add_argument("--playlist-url", default=None, help="Resolve this playlist URL instead of a game")
    parser.add_argument("--timeout", type=int, default=_env_int("GC_TIMEOUT") or 10, help="HTTP timeout in seconds")
    return parser.parse_args(argv)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def print_games(games: List[GameDetails]) -> None:
    if not games:
        logging.info("No games found.")
        return
    logging.info("%-8s | %-6s | %-20s | %-12s | %s", "Season", "ID", "Start (GMT)", "State", "Matchup")
    logging.info("%s", "-" * 80)
    for game in games:
        start = game.game_start_time.strftime("%Y-%m-%d %H:%M") if game.game_start_time else "-"
        matchup = f"{game.away_team} @ {game.home_team}"
        if game.result:
            matchup = f"{matchup} ({game.away_goals}-{game.home_goals})"
        logging.info("%-8s | %-6s | %-20s | %-12s | %s", game.season, game.id, start, game.game_state, matchup)


def print_streams(streams: List[StreamDescriptor]) -> None:
    if not streams:
        logging.info("No streams found.")
        return
    logging.info("%-10s | %s", "Bandwidth", "URL")
    logging.info("%s", "-" * 80)
    for stream in streams:
        logging.info("%-10s | %s", stream.bandwidth, stream.url)


def print_decryption_params(params: List[DecryptionParameters]) -> None:
    if not params:
        logging.info("Stream is not encrypted.")
        return
    for param in params:
        logging.info(
            "seq=%s method=%s key=%s iv=%s",
            param.sequence,
            param.method,
            param.key.hex() if param.key else "-",
            param.iv.hex(),
        )


def select_stream(streams: List[StreamDescriptor], bandwidth: int | None) -> StreamDescriptor | None:
    if not streams:
        return None
    if bandwidth is None:
        return streams[0]
    for stream in streams:
        if stream.bandwidth == bandwidth:
            return stream
    logging.warning("No stream with bandwidth %s; available: %s", bandwidth, [s.bandwidth for s in streams])
    return None


def _require_game(args: argparse.Namespace) -> bool:
    if args.season and args.game_id:
        return True
    logging.error("--season and --game-id are required for this action")
    return False


def run(args: argparse.Namespace, http_client: HttpClient) -> int:
    if args.username and args.password:
        AuthAPI(http_client).login(args.username, args.password, rogers=args.rogers)

    games_api = GamesAPI(http_client)
    playlist_api = PlaylistAPI(http_client)

    if args.list_games:
        games = games_api.get_todays_games() if args.today else games_api.get_recent_games()
        print_games(games.games)
        return 0

    if args.game_details:
        if not _require_game(args):
            return 2
        print_games([games_api.get_game_details(args.season, args.game_id)])
        return 0

    if args.highlights:
        if not _require_game(args):
            return 2
        highlights = HighlightsAPI(http_client).get_game_highlights(args.season, args.game_id)
        if not highlights:
            logging.info("No highlights available.")
        for label, highlight in highlights.items():
            logging.info("%-6s | %s", label, highlight.publish_point)
        return 0

    if not (args.list_streams or args.decryption_params):
        logging.info("Nothing to do. Use --list-games, --game-details, --highlights, --list-streams or --decryption-params.")
        return 0

    if args.playlist_url:
        streams = playlist_api.get_playlists_from_url(args.playlist_url)
    else:
        if not _require_game(args):
            return 2
        streams = playlist_api.get_game_playlists(
            args.season,
            args.game_id,
            args.stream_type,
            STREAM_SOURCES[args.stream_source],
        )

    if args.list_streams:
        print_streams(streams)

    if args.decryption_params:
        if streams and isinstance(streams[0].document, MediaPlaylist):
            media = streams[0]
        else:
            stream = select_stream(streams, args.bandwidth)
            if stream is None:
                return 1
            media = playlist_api.get_media_playlist(stream)
            logging.info("Media playlist %s", media.url)
        print_decryption_params(playlist_api.get_stream_decryption_parameters(media))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging()

    with HttpClient(timeout=args.timeout) as http_client:
        try:
            return run(args, http_client)
        except GameCenterError as exc:
            logging.error("%s", exc)
            return 1


if __name__ == "__main__":
    sys.exit(main())
