"""URL and identifier helpers used when following portal and playlist links."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit


def join_directory(base_url: str, relative: str) -> str:
    """Appends ``relative`` to the directory of ``base_url``.

    The result keeps the base's scheme, host and raw query string; its path
    is the base path up to and including the final ``/`` followed by
    ``relative``. This is not RFC 3986 resolution; it matches how the vendor
    writes relative references (siblings of the playlist, with the playlist's
    query string reused).
    """

    parts = urlsplit(base_url)
    directory = parts.path[: parts.path.rfind("/") + 1]
    return urlunsplit((parts.scheme, parts.netloc, directory + relative, parts.query, ""))


def strip_quotes(value: str) -> str:
    """Removes one surrounding pair of literal double quotes, if present."""

    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def pad_game_id(game_id: str) -> str:
    """Zero-pads ids shorter than four characters (``"21"`` -> ``"0021"``)."""

    if 0 < len(game_id) < 4:
        return game_id.zfill(4)
    return game_id


def normalize_publish_point(publish_point: str) -> str:
    """Turns an ``adaptive://..._pc.mp4`` publish point into an HLS URL."""

    if not publish_point:
        return publish_point
    publish_point = publish_point.replace("adaptive://", "http://", 1)
    return publish_point.replace("_pc.mp4", ".mp4.m3u8", 1)
