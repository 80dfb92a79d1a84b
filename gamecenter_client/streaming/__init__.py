"""Playlist resolution and decryption-parameter helpers."""

from .decryption import DecryptionParameterBuilder, synthesize_iv
from .manifest_parser import ManifestParser
from .playlist_resolver import PlaylistResolver, sanitize_media_playlist

__all__ = [
    "DecryptionParameterBuilder",
    "ManifestParser",
    "PlaylistResolver",
    "sanitize_media_playlist",
    "synthesize_iv",
]
