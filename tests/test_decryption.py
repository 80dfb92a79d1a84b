import pytest

from gamecenter_client.models import CipherInfo, DecryptionParameters, MasterPlaylist, MediaPlaylist, Segment
from gamecenter_client.streaming.decryption import DecryptionParameterBuilder, synthesize_iv
from gamecenter_client.streaming.manifest_parser import ManifestParser
from gamecenter_client.utils.errors import TransportError, UnsupportedFormatError

from .samples import MEDIA_PLAYLIST, REPEATED_KEY_PLAYLIST

KEY1 = b"k" * 16
KEY2 = b"q" * 16
AES = CipherInfo(method="AES-128", key_uri="https://k/key1")


def test_synthesize_iv():
    assert synthesize_iv(5) == bytes.fromhex("00000000000000000000000000000005")
    assert synthesize_iv(2**64 - 1) == bytes(8) + b"\xff" * 8


def test_derive_inherits_method_and_key_but_not_iv(serve):
    client = serve({"https://k/key1": KEY1})
    document = MediaPlaylist(key=AES, segments=[Segment(uri="a.ts", key=AES), Segment(uri="b.ts")])

    params = DecryptionParameterBuilder(client).derive(document)

    assert params == [
        DecryptionParameters(method="AES-128", sequence=0, key=KEY1, iv=synthesize_iv(0)),
        DecryptionParameters(method="AES-128", sequence=1, key=KEY1, iv=synthesize_iv(1)),
    ]
    assert client.get.call_count == 1


def test_derive_from_parsed_playlist(serve):
    client = serve({"https://k/key1": KEY1, "https://k/key2": KEY2})
    document = ManifestParser().decode(MEDIA_PLAYLIST)

    params = DecryptionParameterBuilder(client).derive(document)

    assert [p.sequence for p in params] == [5, 6, 7]
    assert [p.key for p in params] == [KEY1, KEY1, KEY2]
    assert params[0].iv == synthesize_iv(5)
    assert params[1].iv == synthesize_iv(6)
    # Declared IVs are used as their literal attribute text.
    assert params[2].iv == b"0x00000000000000000000000000000009"


def test_derive_placeholders_consume_sequence_numbers(serve):
    client = serve({"https://k/key1": KEY1})
    document = MediaPlaylist(
        start_sequence=10,
        key=AES,
        segments=[Segment(uri="a.ts", key=AES), None, Segment(uri="c.ts")],
    )

    params = DecryptionParameterBuilder(client).derive(document)

    assert [p.sequence for p in params] == [10, 12]
    assert params[1].iv == synthesize_iv(12)


def test_derive_refetches_repeated_keys(serve):
    client = serve({"https://k/key1": KEY1})
    document = MediaPlaylist(key=AES, segments=[Segment(uri="a.ts", key=AES), Segment(uri="b.ts", key=AES)])

    DecryptionParameterBuilder(client).derive(document)

    assert client.get.call_count == 2


def test_derive_unencrypted_playlist_is_empty(http_client):
    document = MediaPlaylist(segments=[Segment(uri="a.ts"), Segment(uri="b.ts")])

    assert DecryptionParameterBuilder(http_client).derive(document) == []
    http_client.get.assert_not_called()


def test_derive_rejects_master_playlist(http_client):
    with pytest.raises(UnsupportedFormatError) as excinfo:
        DecryptionParameterBuilder(http_client).derive(MasterPlaylist())
    assert "Expected a media m3u8 playlist" in str(excinfo.value)


def test_derive_aborts_on_key_failure(serve):
    client = serve({"https://k/key1": KEY1})
    missing = CipherInfo(method="AES-128", key_uri="https://k/missing")
    document = MediaPlaylist(
        key=AES,
        segments=[Segment(uri="a.ts", key=AES), Segment(uri="b.ts"), Segment(uri="c.ts", key=missing)],
    )

    with pytest.raises(TransportError) as excinfo:
        DecryptionParameterBuilder(client).derive(document)
    assert excinfo.value.location == "https://k/missing"


def test_next_parameters_before_any_declaration(http_client):
    builder = DecryptionParameterBuilder(http_client)

    param = builder.next_parameters(None, 3, Segment(uri="a.ts"))

    assert param == DecryptionParameters(method="", sequence=3, key=None, iv=synthesize_iv(3))


def test_next_parameters_method_none_skips_key_fetch(http_client):
    builder = DecryptionParameterBuilder(http_client)
    previous = DecryptionParameters(method="AES-128", sequence=0, key=KEY1, iv=synthesize_iv(0))

    param = builder.next_parameters(previous, 1, Segment(uri="b.ts", key=CipherInfo(method="NONE")))

    assert param.method == "NONE"
    assert param.key is None
    http_client.get.assert_not_called()


def test_derive_repeated_key_tags_use_declared_iv(serve):
    client = serve({"https://k/key1": KEY1})
    document = ManifestParser().decode(REPEATED_KEY_PLAYLIST)

    params = DecryptionParameterBuilder(client).derive(document)

    declared_iv = b"0x000000000000000000000000000000AA"
    assert [p.iv for p in params] == [declared_iv, declared_iv, synthesize_iv(2)]
    assert [p.key for p in params] == [KEY1, KEY1, KEY1]
    assert client.get.call_count == 2


def test_derive_sequence_wraps_around(serve):
    client = serve({"https://k/key1": KEY1})
    document = MediaPlaylist(
        start_sequence=2**64 - 1,
        key=AES,
        segments=[Segment(uri="a.ts", key=AES), Segment(uri="b.ts"), Segment(uri="c.ts")],
    )

    params = DecryptionParameterBuilder(client).derive(document)

    assert [p.sequence for p in params] == [2**64 - 1, 0, 1]
    assert params[0].iv == bytes(8) + b"\xff" * 8
    assert params[1].iv == synthesize_iv(0)
