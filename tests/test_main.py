from gamecenter_client import main
from gamecenter_client.models import MasterPlaylist, StreamDescriptor
from gamecenter_client.utils.errors import TransportError


def _stream(bandwidth):
    return StreamDescriptor(raw_text="", document=MasterPlaylist(), url=f"http://h/{bandwidth}.m3u8", bandwidth=bandwidth)


def test_parse_args_reads_environment(monkeypatch):
    monkeypatch.setenv("GC_SEASON", "2014")
    monkeypatch.setenv("GC_GAME_ID", "21")
    monkeypatch.setenv("GC_ROGERS", "yes")
    monkeypatch.setenv("GC_STREAM_SOURCE", "away")
    monkeypatch.setenv("GC_TIMEOUT", "30")

    args = main.parse_args([])

    assert (args.season, args.game_id) == ("2014", "21")
    assert args.rogers is True
    assert args.stream_source == "away"
    assert args.stream_type == "archive"
    assert args.timeout == 30


def test_parse_args_flags_override_environment(monkeypatch):
    monkeypatch.setenv("GC_SEASON", "2014")

    args = main.parse_args(["--season", "2015", "--list-streams", "--bandwidth", "800000"])

    assert args.season == "2015"
    assert args.list_streams is True
    assert args.bandwidth == 800000


def test_select_stream():
    streams = [_stream(3000), _stream(1200)]

    assert main.select_stream(streams, None).bandwidth == 3000
    assert main.select_stream(streams, 1200).bandwidth == 1200
    assert main.select_stream(streams, 999) is None
    assert main.select_stream([], None) is None


def test_run_requires_game_for_streams(http_client):
    args = main.parse_args(["--list-streams"])
    args.season = args.game_id = args.username = None

    assert main.run(args, http_client) == 2
    http_client.post.assert_not_called()


def test_main_reports_errors(monkeypatch):
    def failing_run(args, http_client):
        raise TransportError("get_recent_games", "Expected a status code of 200", 500, "http://h")

    monkeypatch.setattr(main, "run", failing_run)

    assert main.main(["--list-games"]) == 1
