"""Decodes m3u8 bytes into master, media or unrecognized playlist models."""

from __future__ import annotations

import logging
from typing import List, Optional

import m3u8

from ..models import CipherInfo, Manifest, MasterPlaylist, MediaPlaylist, Segment, UnrecognizedPlaylist, Variant
from ..utils.errors import ManifestDecodeError

ERR_M3U8_DECODE = "m3u8 decode: "
M3U8_HEADER = "#EXTM3U"


class ManifestParser:
    """Thin adapter over the ``m3u8`` library."""

    def decode(self, data: bytes, operation: str = "decode") -> Manifest:
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ManifestDecodeError(operation, ERR_M3U8_DECODE + str(exc)) from exc

        if not text.lstrip().startswith(M3U8_HEADER):
            raise ManifestDecodeError(operation, ERR_M3U8_DECODE + "missing #EXTM3U header")

        try:
            playlist = m3u8.M3U8(content=text)
        except Exception as exc:
            # m3u8 raises bare ValueError/ParseError variants on malformed attributes.
            raise ManifestDecodeError(operation, ERR_M3U8_DECODE + str(exc)) from exc

        if playlist.is_variant:
            return self._to_master(playlist)
        if playlist.segments or playlist.target_duration is not None:
            return self._to_media(playlist, declaring_segments(text))
        logging.debug("Playlist has neither variants nor segments")
        return UnrecognizedPlaylist()

    def _to_master(self, playlist: m3u8.M3U8) -> MasterPlaylist:
        variants = []
        for entry in playlist.playlists:
            info = entry.stream_info
            resolution = None
            if info.resolution:
                resolution = "x".join(str(part) for part in info.resolution)
            variants.append(
                Variant(
                    uri=entry.uri,
                    bandwidth=info.bandwidth or 0,
                    codecs=info.codecs,
                    resolution=resolution,
                )
            )
        return MasterPlaylist(variants=variants)

    def _to_media(self, playlist: m3u8.M3U8, declaring: List[bool]) -> MediaPlaylist:
        segments: List[Optional[Segment]] = []
        for index, entry in enumerate(playlist.segments):
            # m3u8 attaches the active key to every segment.
            declared = None
            if entry.key is not None and index < len(declaring) and declaring[index]:
                declared = _cipher_info(entry.key)
            segments.append(Segment(uri=entry.uri, duration=entry.duration or 0.0, key=declared))

        document_key = next((key for key in playlist.keys if key is not None), None)
        return MediaPlaylist(
            start_sequence=playlist.media_sequence or 0,
            key=_cipher_info(document_key) if document_key is not None else None,
            segments=segments,
            target_duration=playlist.target_duration,
            is_endlist=bool(playlist.is_endlist),
        )


def _cipher_info(key: m3u8.Key) -> CipherInfo:
    return CipherInfo(
        method=key.method or "",
        key_uri=key.uri or "",
        iv=key.iv.encode("utf-8") if key.iv else None,
    )


def declaring_segments(text: str) -> List[bool]:
    """One flag per segment: True when an ``#EXT-X-KEY`` tag precedes it directly.

    A key tag applies to the next segment URI, even when it repeats the
    previous tag verbatim.
    """

    flags: List[bool] = []
    key_pending = False
    expect_segment = False
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("#EXT-X-KEY:"):
            key_pending = True
        elif line.startswith("#EXTINF:"):
            expect_segment = True
        elif not line.startswith("#") and expect_segment:
            flags.append(key_pending)
            key_pending = False
            expect_segment = False
    return flags
