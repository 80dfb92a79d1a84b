"""Pydantic models for parsed playlists, stream descriptors and cipher state."""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

MAX_SEQUENCE = 2**64 - 1


class CipherInfo(BaseModel):
    """An ``#EXT-X-KEY`` block as declared in a media playlist."""

    model_config = ConfigDict(frozen=True)

    method: str
    key_uri: str = ""
    # Literal bytes of the IV attribute text, not a hex decode.
    iv: Optional[bytes] = None


class Variant(BaseModel):
    """One ``#EXT-X-STREAM-INF`` entry of a master playlist."""

    model_config = ConfigDict(frozen=True)

    uri: str
    bandwidth: int = Field(default=0, ge=0)
    codecs: Optional[str] = None
    resolution: Optional[str] = None


class Segment(BaseModel):
    """A media segment; ``key`` is set only where the segment declares one."""

    model_config = ConfigDict(frozen=True)

    uri: str
    duration: float = 0.0
    key: Optional[CipherInfo] = None


class MasterPlaylist(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["master"] = "master"
    variants: List[Variant] = Field(default_factory=list)


class MediaPlaylist(BaseModel):
    """Media playlist; ``None`` segments are placeholder slots."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["media"] = "media"
    start_sequence: int = Field(default=0, ge=0, le=MAX_SEQUENCE)
    key: Optional[CipherInfo] = None
    segments: List[Optional[Segment]] = Field(default_factory=list)
    target_duration: Optional[float] = None
    is_endlist: bool = False


class UnrecognizedPlaylist(BaseModel):
    """A valid ``#EXTM3U`` document that is neither master nor media."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unrecognized"] = "unrecognized"


Manifest = Annotated[
    Union[MasterPlaylist, MediaPlaylist, UnrecognizedPlaylist],
    Field(discriminator="kind"),
]


class StreamDescriptor(BaseModel):
    """A selectable stream: a master variant or a media segment reference."""

    model_config = ConfigDict(frozen=True)

    raw_text: str
    document: Union[MasterPlaylist, MediaPlaylist]
    url: str
    bandwidth: int = Field(default=0, ge=0)


class DecryptionParameters(BaseModel):
    """Everything an external decryptor needs for one segment."""

    model_config = ConfigDict(frozen=True)

    method: str
    sequence: int = Field(ge=0, le=MAX_SEQUENCE)
    key: Optional[bytes] = None
    iv: bytes
