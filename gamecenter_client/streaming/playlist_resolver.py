"""Resolves master and media playlists into fully-qualified stream descriptors."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models import CipherInfo, MasterPlaylist, MediaPlaylist, StreamDescriptor
from ..utils.errors import UnsupportedFormatError
from ..utils.http_client import HttpClient
from ..utils.url_utils import join_directory, strip_quotes
from .manifest_parser import ManifestParser

ERR_M3U8_EXPECTED_MEDIA = "Expected a media m3u8 playlist"


def sanitize_cipher(cipher: Optional[CipherInfo]) -> Optional[CipherInfo]:
    if cipher is None:
        return None
    key_uri = strip_quotes(cipher.key_uri)
    if key_uri == cipher.key_uri:
        return cipher
    return cipher.model_copy(update={"key_uri": key_uri})


def sanitize_media_playlist(playlist: MediaPlaylist) -> MediaPlaylist:
    """Returns a copy whose key URIs have their literal quotes removed."""

    segments = [
        segment.model_copy(update={"key": sanitize_cipher(segment.key)}) if segment is not None else None
        for segment in playlist.segments
    ]
    return playlist.model_copy(update={"key": sanitize_cipher(playlist.key), "segments": segments})


class PlaylistResolver:
    """Fetches a playlist and expands it into one descriptor per stream or segment."""

    def __init__(self, http_client: HttpClient, parser: Optional[ManifestParser] = None) -> None:
        self._client = http_client
        self._parser = parser or ManifestParser()

    def resolve(self, request_url: str) -> List[StreamDescriptor]:
        """Returns master variants (highest bandwidth first) or media segments (playback order)."""

        operation = "resolve"
        body = self._client.get(request_url, operation=operation)
        document = self._parser.decode(body, operation=operation)
        raw_text = body.decode("utf-8-sig")

        if isinstance(document, MasterPlaylist):
            descriptors = [
                StreamDescriptor(
                    raw_text=raw_text,
                    document=document,
                    url=join_directory(request_url, variant.uri),
                    bandwidth=variant.bandwidth,
                )
                for variant in document.variants
            ]
            # sorted() is stable, so equal bandwidths keep playlist order.
            descriptors = sorted(descriptors, key=lambda item: item.bandwidth, reverse=True)
            logging.debug("Resolved %s variants from %s", len(descriptors), request_url)
            return descriptors

        if isinstance(document, MediaPlaylist):
            media = sanitize_media_playlist(document)
            descriptors = [
                StreamDescriptor(
                    raw_text=raw_text,
                    document=media,
                    url=join_directory(request_url, segment.uri),
                )
                for segment in media.segments
                if segment is not None
            ]
            logging.debug("Resolved %s segments from %s", len(descriptors), request_url)
            return descriptors

        raise UnsupportedFormatError(operation, f"Unsupported m3u8 list type '{document.kind}'.")

    def get_media_playlist(self, master: StreamDescriptor) -> StreamDescriptor:
        """Follows a master variant and wraps its media playlist."""

        operation = "get_media_playlist"
        body = self._client.get(master.url, operation=operation)
        document = self._parser.decode(body, operation=operation)
        if not isinstance(document, MediaPlaylist):
            raise UnsupportedFormatError(operation, ERR_M3U8_EXPECTED_MEDIA)

        return StreamDescriptor(
            raw_text=body.decode("utf-8-sig"),
            document=sanitize_media_playlist(document),
            url=master.url,
            bandwidth=master.bandwidth,
        )
