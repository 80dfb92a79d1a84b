"""Data models for games, playlists, and decryption parameters."""

from .game_models import GameDetails, GameHighlight, GameHighlights, GamesList
from .playlist_models import (
    MAX_SEQUENCE,
    CipherInfo,
    DecryptionParameters,
    Manifest,
    MasterPlaylist,
    MediaPlaylist,
    Segment,
    StreamDescriptor,
    UnrecognizedPlaylist,
    Variant,
)

__all__ = [
    "MAX_SEQUENCE",
    "GameDetails",
    "GameHighlight",
    "GameHighlights",
    "GamesList",
    "CipherInfo",
    "DecryptionParameters",
    "Manifest",
    "MasterPlaylist",
    "MediaPlaylist",
    "Segment",
    "StreamDescriptor",
    "UnrecognizedPlaylist",
    "Variant",
]
