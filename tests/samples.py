"""Playlist fixtures shared by the streaming tests."""

MASTER_URL = "https://h/a/b/master.m3u8?x=1"

MASTER_PLAYLIST = b"""#EXTM3U
#EXT-X-STREAM-INF:BANDWIDTH=1200000
1200.m3u8
#EXT-X-STREAM-INF:BANDWIDTH=3000000
3000.m3u8
#EXT-X-STREAM-INF:BANDWIDTH=1200000
1200b.m3u8
#EXT-X-STREAM-INF:BANDWIDTH=800000
800.m3u8
"""

MEDIA_PLAYLIST = b"""#EXTM3U
#EXT-X-TARGETDURATION:10
#EXT-X-MEDIA-SEQUENCE:5
#EXT-X-KEY:METHOD=AES-128,URI="https://k/key1"
#EXTINF:10,
seg0.ts
#EXTINF:10,
seg1.ts
#EXT-X-KEY:METHOD=AES-128,URI="https://k/key2",IV=0x00000000000000000000000000000009
#EXTINF:10,
seg2.ts
#EXT-X-ENDLIST
"""

PLAIN_MEDIA_PLAYLIST = b"""#EXTM3U
#EXT-X-TARGETDURATION:10
#EXTINF:10,
seg0.ts
#EXTINF:10,
seg1.ts
#EXT-X-ENDLIST
"""

REPEATED_KEY_PLAYLIST = b"""#EXTM3U
#EXT-X-TARGETDURATION:10
#EXT-X-KEY:METHOD=AES-128,URI="https://k/key1",IV=0x000000000000000000000000000000AA
#EXTINF:10,
seg0.ts
#EXT-X-KEY:METHOD=AES-128,URI="https://k/key1",IV=0x000000000000000000000000000000AA
#EXTINF:10,
seg1.ts
#EXTINF:10,
seg2.ts
#EXT-X-ENDLIST
"""
