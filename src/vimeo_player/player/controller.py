"""
Orchestration of one embedded Vimeo video.

    UNINITIALIZED -> VALIDATING -> FETCHING -> RESOLVED
                          |             |
                          +-> FAILED <--+

Validation errors are raised from the constructor. A failed fetch still
builds an (empty) playback session so the UI never gets stuck on the
loading state, and the unplayable hook fires once.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from ..core.errors import InvalidVimeoUrlError, VideoIdExtractionError
from ..models.video_config import VimeoVideoConfig
from loguru import logger
from ..utils.validators import VimeoUrlValidator
from ..vimeo.config_service import VimeoConfigFetcher
from ..vimeo.streams import select_stream_url
from .session import FinishCallback, PlaybackOptions, PlaybackSession, ProgressCallback, Subscription

FetchTask = Callable[[], VimeoVideoConfig | None]
FetchCallback = Callable[[VimeoVideoConfig | None], None]
FetchRunner = Callable[[FetchTask, FetchCallback], None]
SessionFactory = Callable[[str, PlaybackOptions], PlaybackSession]


class PlayerState(str, Enum):
    UNINITIALIZED = "uninitialized"
    VALIDATING = "validating"
    FETCHING = "fetching"
    RESOLVED = "resolved"
    FAILED = "failed"


class UnplayableReason(str, Enum):
    CONFIG_UNAVAILABLE = "config_unavailable"
    NO_PLAYABLE_STREAM = "no_playable_stream"


def run_inline(task: FetchTask, callback: FetchCallback) -> None:
    """Default runner: fetch on the calling thread."""
    callback(task())


def validate_vimeo_url(url: str) -> str:
    """Return the video id of ``url`` or raise the matching construction error."""
    url = (url or "").strip()
    if not VimeoUrlValidator.is_vimeo_url(url):
        logger.error("[VimeoPlayer] Invalid Vimeo video url: {}", url)
        raise InvalidVimeoUrlError(url)
    video_id = VimeoUrlValidator.extract_video_id(url)
    if not video_id:
        logger.error("[VimeoPlayer] Unable to extract video id: {}", url)
        raise VideoIdExtractionError(url)
    return video_id


class VimeoPlayerController:
    def __init__(
        self,
        url: str,
        fetcher: VimeoConfigFetcher,
        session_factory: SessionFactory,
        options: PlaybackOptions | None = None,
        on_progress: ProgressCallback | None = None,
        on_finished: FinishCallback | None = None,
        on_unplayable: Callable[[UnplayableReason], None] | None = None,
        on_session_ready: Callable[[PlaybackSession], None] | None = None,
    ):
        self.state = PlayerState.UNINITIALIZED
        self.url = (url or "").strip()
        self.fetcher = fetcher
        self.session_factory = session_factory
        self.options = options or PlaybackOptions()
        self.on_progress = on_progress
        self.on_finished = on_finished
        self.on_unplayable = on_unplayable
        self.on_session_ready = on_session_ready

        self.session: PlaybackSession | None = None
        self.stream_url: str | None = None
        self.unplayable_reason: UnplayableReason | None = None
        self._subscriptions: list[Subscription] = []
        self._started = False
        self._disposed = False

        self.state = PlayerState.VALIDATING
        self.video_id = self._validate(self.url)

    def _validate(self, url: str) -> str:
        try:
            return validate_vimeo_url(url)
        except (InvalidVimeoUrlError, VideoIdExtractionError):
            self.state = PlayerState.FAILED
            raise

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def start(self, runner: FetchRunner | None = None) -> None:
        """Kick off the single config fetch. Calling it again is a no-op."""
        if self._started or self._disposed:
            return
        self._started = True
        self.state = PlayerState.FETCHING
        logger.info("[VimeoPlayer] Resolving video {}", self.video_id)
        (runner or run_inline)(self._fetch, self._on_config_resolved)

    def _fetch(self) -> VimeoVideoConfig | None:
        return self.fetcher.fetch(self.video_id)

    def _on_config_resolved(self, config: VimeoVideoConfig | None) -> None:
        if self._disposed:
            logger.debug("[VimeoPlayer] Ignoring config for {}: player already disposed", self.video_id)
            return
        if self.state is not PlayerState.FETCHING:
            return

        reason: UnplayableReason | None = None
        if config is None:
            self.stream_url = ""
            self.state = PlayerState.FAILED
            reason = UnplayableReason.CONFIG_UNAVAILABLE
        else:
            self.stream_url = select_stream_url(config)
            self.state = PlayerState.RESOLVED
            if self.stream_url:
                logger.debug("[VimeoPlayer] Selected stream for {}: {}", self.video_id, self.stream_url)
            else:
                reason = UnplayableReason.NO_PLAYABLE_STREAM

        # Build the (possibly empty) session first so the UI leaves the loading state
        self._create_session(self.stream_url)
        if reason is not None:
            self._report_unplayable(reason)

    def _report_unplayable(self, reason: UnplayableReason) -> None:
        if self.unplayable_reason is not None:
            return
        self.unplayable_reason = reason
        logger.warning("[VimeoPlayer] Video {} cannot be played ({})", self.video_id, reason.value)
        if self.on_unplayable is not None:
            self.on_unplayable(reason)

    def _create_session(self, stream_url: str) -> None:
        session = self.session_factory(stream_url, self.options)
        self.session = session
        if self.on_progress is not None:
            self._subscriptions.append(session.add_progress_listener(self.on_progress))
        if self.on_finished is not None:
            self._subscriptions.append(session.add_finish_listener(self.on_finished))
        if self.on_session_ready is not None:
            self.on_session_ready(session)

    def pause(self) -> None:
        if self.session is not None and not self._disposed:
            self.session.pause()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions.clear()
        if self.session is not None:
            self.session.dispose()
        logger.debug("[VimeoPlayer] Disposed player for video {}", self.video_id)
