import pytest

from fakes import FakePlaybackSession
from vimeo_player.core.errors import InvalidVimeoUrlError, VideoIdExtractionError
from vimeo_player.models import VimeoVideoConfig
from vimeo_player.player.controller import PlayerState, UnplayableReason, VimeoPlayerController
from vimeo_player.player.session import PlaybackOptions
from vimeo_player.utils.validators import VimeoUrlValidator


class StubFetcher:
    def __init__(self, config=None):
        self.config = config
        self.fetched = []

    def fetch(self, video_id):
        self.fetched.append(video_id)
        return self.config


class DeferredRunner:
    """Holds the fetch until the test decides to deliver it."""

    def __init__(self):
        self.calls = []

    def __call__(self, task, callback):
        self.calls.append((task, callback))

    def deliver(self):
        task, callback = self.calls[-1]
        callback(task())


def _config(progressive):
    return VimeoVideoConfig.from_json({"request": {"files": {"progressive": progressive}}})


def _controller(config=None, **kwargs):
    sessions = []
    alerts = []

    def factory(url, options):
        session = FakePlaybackSession(url, options)
        sessions.append(session)
        return session

    controller = VimeoPlayerController(
        kwargs.pop("url", "https://vimeo.com/76979871"),
        StubFetcher(config),
        session_factory=factory,
        on_unplayable=alerts.append,
        **kwargs,
    )
    return controller, sessions, alerts


def test_invalid_url_fails_construction():
    with pytest.raises(InvalidVimeoUrlError):
        _controller(url="https://example.com/video/123")


def test_missing_id_fails_construction(monkeypatch):
    monkeypatch.setattr(VimeoUrlValidator, "extract_video_id", staticmethod(lambda url: None))
    with pytest.raises(VideoIdExtractionError):
        _controller()


def test_valid_url_is_validated_and_waits_for_start():
    controller, sessions, _ = _controller(url="  https://player.vimeo.com/video/76979871 ")
    assert controller.state is PlayerState.VALIDATING
    assert controller.video_id == "76979871"
    assert sessions == []


def test_resolves_first_stream_into_a_session():
    controller, sessions, alerts = _controller(_config([{"url": ""}, {"url": "a.mp4"}, {"url": "b.mp4"}]))
    runner = DeferredRunner()

    controller.start(runner)
    assert controller.state is PlayerState.FETCHING

    runner.deliver()
    assert controller.state is PlayerState.RESOLVED
    assert controller.stream_url == "a.mp4"
    assert [s.source_url for s in sessions] == ["a.mp4"]
    assert alerts == []


def test_default_runner_fetches_inline():
    controller, sessions, _ = _controller(_config([{"url": "a.mp4"}]))
    controller.start()
    assert controller.fetcher.fetched == ["76979871"]
    assert sessions[0].source_url == "a.mp4"


@pytest.mark.parametrize("progressive", [[], None, [{"url": ""}, {"quality": "720p"}]])
def test_no_playable_stream_alerts_once_with_empty_session(progressive):
    config = VimeoVideoConfig.from_json({"request": {"files": {} if progressive is None else {"progressive": progressive}}})
    controller, sessions, alerts = _controller(config)

    controller.start()

    assert controller.state is PlayerState.RESOLVED
    assert alerts == [UnplayableReason.NO_PLAYABLE_STREAM]
    assert [s.source_url for s in sessions] == [""]


def test_config_failure_still_builds_an_empty_session():
    controller, sessions, alerts = _controller(None)

    controller.start()

    assert controller.state is PlayerState.FAILED
    assert alerts == [UnplayableReason.CONFIG_UNAVAILABLE]
    assert [s.source_url for s in sessions] == [""]


def test_start_only_fetches_once():
    controller, _, _ = _controller(_config([{"url": "a.mp4"}]))
    runner = DeferredRunner()
    controller.start(runner)
    controller.start(runner)
    assert len(runner.calls) == 1


def test_late_result_after_dispose_is_ignored():
    controller, sessions, alerts = _controller(None)
    runner = DeferredRunner()
    controller.start(runner)

    controller.dispose()
    runner.deliver()

    assert sessions == []
    assert alerts == []
    assert controller.session is None
    assert controller.state is PlayerState.FETCHING


def test_dispose_before_start_prevents_fetch():
    controller, _, _ = _controller(_config([{"url": "a.mp4"}]))
    runner = DeferredRunner()
    controller.dispose()
    controller.start(runner)
    assert runner.calls == []


def test_callbacks_are_wired_and_released_on_dispose():
    positions = []
    finished = []
    controller, sessions, _ = _controller(
        _config([{"url": "a.mp4"}]),
        options=PlaybackOptions(start_at_ms=1500),
        on_progress=positions.append,
        on_finished=lambda: finished.append(True),
    )
    controller.start()
    session = sessions[0]
    assert session.options.start_at_ms == 1500

    session.push(initialized=True, playing=True, position_ms=2000, duration_ms=4000)
    session.push(initialized=True, position_ms=4000, duration_ms=4000)
    assert positions == [2000]
    assert finished == [True]
    assert session.seeks == [1500]

    controller.dispose()
    controller.dispose()
    session.push(initialized=True, playing=True, position_ms=3000, duration_ms=4000)

    assert positions == [2000]
    assert session.release_calls == 1
    assert controller.is_disposed


def test_session_ready_hook_receives_the_session():
    ready = []
    controller, sessions, _ = _controller(_config([{"url": "a.mp4"}]), on_session_ready=ready.append)
    controller.start()
    assert ready == sessions


def test_pause_is_forwarded_until_disposed():
    controller, sessions, _ = _controller(_config([{"url": "a.mp4"}]))
    controller.pause()
    controller.start()
    controller.pause()
    controller.dispose()
    controller.pause()
    assert sessions[0].pause_calls == 1
