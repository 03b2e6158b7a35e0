"""
Playback session seam.

The controller only ever talks to a :class:`PlaybackSession`: it registers a
progress and a finish listener and disposes the session. How frames get on
screen is up to the concrete subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable

from loguru import logger

ProgressCallback = Callable[[int], None]
FinishCallback = Callable[[], None]

DEFAULT_SYSTEM_UI_OVERLAYS = ("top", "bottom")
DEFAULT_ORIENTATIONS = ("landscape_left", "landscape_right", "portrait_up", "portrait_down")


@dataclass
class PlaybackOptions:
    start_at_ms: int | None = None
    autoplay: bool = False
    # Passed through untouched to the concrete session
    system_ui_overlays: tuple[str, ...] = DEFAULT_SYSTEM_UI_OVERLAYS
    preferred_orientations: tuple[str, ...] = DEFAULT_ORIENTATIONS


@dataclass(frozen=True)
class PlaybackSnapshot:
    """Player state at one point in time (milliseconds)."""

    initialized: bool = False
    playing: bool = False
    position_ms: int = 0
    duration_ms: int = 0


class Subscription:
    """Handle returned by listener registration; ``cancel()`` is idempotent."""

    def __init__(self, listeners: list, callback: Callable) -> None:
        self._listeners = listeners
        self._callback = callback
        self._active = True
        listeners.append(callback)

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        try:
            self._listeners.remove(self._callback)
        except ValueError:
            pass


@dataclass
class _Listeners:
    progress: list[ProgressCallback] = field(default_factory=list)
    finish: list[FinishCallback] = field(default_factory=list)


class PlaybackSession(ABC):
    """Base playback session with typed progress/finish observers.

    Subclasses feed state changes into :meth:`_on_snapshot`; the base class
    handles the one-shot initial seek and listener dispatch.
    """

    def __init__(self, source_url: str, options: PlaybackOptions | None = None) -> None:
        self.source_url = source_url
        self.options = options or PlaybackOptions()
        self._listeners = _Listeners()
        self._seeked_to_start = False
        self._finish_fired = False
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def has_source(self) -> bool:
        return bool(self.source_url)

    def add_progress_listener(self, callback: ProgressCallback) -> Subscription:
        return Subscription(self._listeners.progress, callback)

    def add_finish_listener(self, callback: FinishCallback) -> Subscription:
        return Subscription(self._listeners.finish, callback)

    @abstractmethod
    def play(self) -> None: ...

    @abstractmethod
    def pause(self) -> None: ...

    @abstractmethod
    def seek(self, position_ms: int) -> None: ...

    @abstractmethod
    def _release(self) -> None:
        """Stop playback and free the media source."""

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._listeners.progress.clear()
        self._listeners.finish.clear()
        self._release()
        logger.debug("[Playback] Session disposed: {}", self.source_url or "<empty>")

    def _on_snapshot(self, snapshot: PlaybackSnapshot) -> None:
        if self._disposed or not snapshot.initialized:
            return

        start_at = self.options.start_at_ms
        if start_at is not None and not self._seeked_to_start and snapshot.duration_ms > start_at:
            self._seeked_to_start = True
            self.seek(start_at)

        at_end = snapshot.duration_ms > 0 and snapshot.position_ms == snapshot.duration_ms
        if not at_end:
            self._finish_fired = False

        if snapshot.playing:
            for callback in list(self._listeners.progress):
                callback(snapshot.position_ms)
        elif at_end and not self._finish_fired:
            self._finish_fired = True
            for callback in list(self._listeners.finish):
                callback()
