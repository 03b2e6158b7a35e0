from __future__ import annotations

from PySide6.QtCore import QUrl
from PySide6.QtMultimedia import QMediaPlayer
from qfluentwidgets.multimedia import VideoWidget

from loguru import logger
from .session import PlaybackOptions, PlaybackSession, PlaybackSnapshot

_READY_STATUSES = {
    QMediaPlayer.MediaStatus.LoadedMedia,
    QMediaPlayer.MediaStatus.BufferingMedia,
    QMediaPlayer.MediaStatus.BufferedMedia,
    QMediaPlayer.MediaStatus.EndOfMedia,
}


class QtPlaybackSession(PlaybackSession):
    """Playback session backed by qfluentwidgets' ``VideoWidget``.

    The widget owns the play bar (play/pause, seek slider, volume); this class
    only loads the source and translates QMediaPlayer signals into snapshots.
    """

    def __init__(
        self,
        source_url: str,
        video_widget: VideoWidget,
        options: PlaybackOptions | None = None,
    ) -> None:
        super().__init__(source_url, options)
        self.video_widget = video_widget
        self.player: QMediaPlayer = video_widget.player

        self.player.positionChanged.connect(self._on_player_changed)
        self.player.durationChanged.connect(self._on_player_changed)
        self.player.playbackStateChanged.connect(self._on_player_changed)
        self.player.mediaStatusChanged.connect(self._on_player_changed)
        self.player.errorOccurred.connect(self._on_player_error)

        self.video_widget.setVideo(QUrl(source_url))
        if self.options.autoplay and self.has_source:
            self.play()

    def _snapshot(self) -> PlaybackSnapshot:
        return PlaybackSnapshot(
            initialized=self.player.mediaStatus() in _READY_STATUSES,
            playing=self.player.playbackState() == QMediaPlayer.PlaybackState.PlayingState,
            position_ms=int(self.player.position()),
            duration_ms=int(self.player.duration()),
        )

    def _on_player_changed(self, *_args) -> None:
        self._on_snapshot(self._snapshot())

    def _on_player_error(self, _error, message: str = "") -> None:
        logger.error("[Playback] Player error ({}): {}", self.source_url or "<empty>", message)

    def play(self) -> None:
        if not self.is_disposed:
            self.video_widget.play()

    def pause(self) -> None:
        if not self.is_disposed:
            self.video_widget.pause()

    def seek(self, position_ms: int) -> None:
        if not self.is_disposed:
            self.player.setPosition(int(position_ms))

    def _release(self) -> None:
        for signal in (
            self.player.positionChanged,
            self.player.durationChanged,
            self.player.playbackStateChanged,
            self.player.mediaStatusChanged,
        ):
            try:
                signal.disconnect(self._on_player_changed)
            except (RuntimeError, TypeError):
                pass
        try:
            self.player.errorOccurred.disconnect(self._on_player_error)
        except (RuntimeError, TypeError):
            pass

        self.video_widget.stop()
        self.player.setSource(QUrl())
