"""Identifiers accepted by the publish point and highlight servlets."""

# Stream types for the publish point servlet.
STREAM_TYPE_ARCHIVE = "archive"
STREAM_TYPE_CONDENSED = "condensed"
STREAM_TYPE_DVR = "dvr"
STREAM_TYPE_LIVE = "live"

STREAM_TYPES = (STREAM_TYPE_ARCHIVE, STREAM_TYPE_CONDENSED, STREAM_TYPE_DVR, STREAM_TYPE_LIVE)

# Stream sources.
STREAM_SOURCE_HOME = "2"
STREAM_SOURCE_AWAY = "4"
STREAM_SOURCE_FRENCH = "8"

STREAM_SOURCES = {
    "home": STREAM_SOURCE_HOME,
    "away": STREAM_SOURCE_AWAY,
    "french": STREAM_SOURCE_FRENCH,
}

SEASON_TYPE_PRE = "01"
SEASON_TYPE_REGULAR = "02"
SEASON_TYPE_POST = "03"
