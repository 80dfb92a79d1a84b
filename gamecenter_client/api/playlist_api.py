"""API client that turns a game into its HLS playlists and decryption parameters."""

from __future__ import annotations

import logging
from typing import List
from urllib.parse import urlsplit

from ..models import DecryptionParameters, StreamDescriptor
from ..streaming import DecryptionParameterBuilder, PlaylistResolver
from ..utils.errors import GameCenterError, ResponseDecodeError
from ..utils.http_client import HttpClient
from ..utils.url_utils import pad_game_id
from .constants import SEASON_TYPE_REGULAR
from .games_api import ERR_XML_UNMARSHAL, parse_xml

PUBLISH_POINT_URL = "https://gamecenter.nhl.com/nhlgc/servlets/publishpoint"


class PlaylistAPI:
    """Resolves publish points into stream descriptors."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client
        self._resolver = PlaylistResolver(http_client)
        self._builder = DecryptionParameterBuilder(http_client)

    def get_game_playlists(
        self,
        season: str,
        game_id: str,
        stream_type: str,
        stream_source: str,
    ) -> List[StreamDescriptor]:
        """Returns the master playlist variants of a game, highest bandwidth first."""

        operation = "get_game_playlists"
        form = {
            "type": "game",
            "gs": stream_type,
            "ft": stream_source,
            "id": season + SEASON_TYPE_REGULAR + pad_game_id(game_id),
            "plid": self._client.plid,
        }
        try:
            body = self._client.post(PUBLISH_POINT_URL, form, operation=operation)
        except Exception as exc:
            logging.error("Failed to fetch publish point for %s: %s", form["id"], exc)
            raise

        # Drop the _ipad marker from the playlist path.
        root = parse_xml(body.replace(b"_ipad", b""), operation)
        path = (root.findtext("path") or "").strip()
        if not path:
            raise ResponseDecodeError(operation, ERR_XML_UNMARSHAL + "publish point has no path")
        logging.info("Publish point for %s: %s", form["id"], path)
        return self.get_playlists_from_url(path)

    def get_playlists_from_url(self, url: str) -> List[StreamDescriptor]:
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            raise GameCenterError("get_playlists_from_url", f"invalid playlist URL '{url}'")
        return self._resolver.resolve(url)

    def get_media_playlist(self, master: StreamDescriptor) -> StreamDescriptor:
        return self._resolver.get_media_playlist(master)

    def get_stream_decryption_parameters(self, media: StreamDescriptor) -> List[DecryptionParameters]:
        return self._builder.derive(media.document)
