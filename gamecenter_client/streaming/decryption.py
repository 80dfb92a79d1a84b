"""Derives the per-segment parameters needed to decrypt an HLS media playlist."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models import MAX_SEQUENCE, CipherInfo, DecryptionParameters, MediaPlaylist, Segment
from ..utils.errors import UnsupportedFormatError
from ..utils.http_client import HttpClient
from .playlist_resolver import ERR_M3U8_EXPECTED_MEDIA

METHOD_NONE = "NONE"


def synthesize_iv(sequence: int) -> bytes:
    """Eight zero bytes followed by the big-endian sequence number."""

    return bytes(8) + sequence.to_bytes(8, "big")


class DecryptionParameterBuilder:
    """Walks a media playlist and pairs every segment with its key and IV.

    A segment without its own ``#EXT-X-KEY`` inherits the method and key of
    the segment before it, but its IV is always synthesized from its own
    sequence number. Keys are fetched once per declaring segment, in order.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def derive(self, document) -> List[DecryptionParameters]:
        operation = "derive"
        if not isinstance(document, MediaPlaylist):
            raise UnsupportedFormatError(operation, ERR_M3U8_EXPECTED_MEDIA)
        if document.key is None:
            logging.debug("Media playlist is not encrypted")
            return []

        params: List[DecryptionParameters] = []
        previous: Optional[DecryptionParameters] = None
        for index, segment in enumerate(document.segments):
            # Placeholders still consume a sequence number.
            if segment is None:
                continue
            # Sequence numbers are unsigned 64-bit and wrap around.
            sequence = (document.start_sequence + index) & MAX_SEQUENCE
            previous = self.next_parameters(previous, sequence, segment)
            params.append(previous)
        return params

    def next_parameters(
        self,
        previous: Optional[DecryptionParameters],
        sequence: int,
        segment: Segment,
    ) -> DecryptionParameters:
        """Computes one segment's parameters from the previous segment's."""

        cipher = segment.key
        iv = synthesize_iv(sequence)
        if cipher is None:
            return DecryptionParameters(
                method=previous.method if previous else "",
                sequence=sequence,
                key=previous.key if previous else None,
                iv=iv,
            )

        if cipher.iv:
            iv = cipher.iv
        return DecryptionParameters(
            method=cipher.method,
            sequence=sequence,
            key=self._fetch_key(cipher),
            iv=iv,
        )

    def _fetch_key(self, cipher: CipherInfo) -> Optional[bytes]:
        if cipher.method == METHOD_NONE or not cipher.key_uri:
            return None
        return self._client.get(cipher.key_uri, operation="derive")
