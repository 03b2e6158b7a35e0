"""
Embeddable Vimeo video player widget.

Shows a progress ring while the player config is fetched in the background,
then hands the selected MP4 stream to qfluentwidgets' ``VideoWidget``.
"""

from __future__ import annotations

from loguru import logger
from PySide6.QtCore import QCoreApplication, Qt
from PySide6.QtWidgets import QVBoxLayout, QWidget
from qfluentwidgets import IndeterminateProgressRing, MessageBox

from ..core.config_manager import config_credential_provider
from ..player.controller import UnplayableReason, VimeoPlayerController, validate_vimeo_url
from ..player.session import (
    DEFAULT_ORIENTATIONS,
    DEFAULT_SYSTEM_UI_OVERLAYS,
    FinishCallback,
    PlaybackOptions,
    PlaybackSession,
    ProgressCallback,
)
from ..utils.translator import describe_unplayable
from ..vimeo.config_service import CredentialProvider, RequestOptions, VimeoConfigFetcher
from ..vimeo.workers import BackgroundFetchRunner, wait_for_detached_workers
from .window_watcher import WindowCloseWatcher


class VimeoVideoPlayer(QWidget):
    """Vimeo video player.

    Raises ``InvalidVimeoUrlError`` / ``VideoIdExtractionError`` for a bad URL
    and, for a valid one, ``MissingCredentialError`` when no access token is
    available.
    """

    def __init__(
        self,
        url: str,
        *,
        start_at_ms: int | None = None,
        on_progress: ProgressCallback | None = None,
        on_finished: FinishCallback | None = None,
        autoplay: bool = False,
        system_ui_overlays: tuple[str, ...] = DEFAULT_SYSTEM_UI_OVERLAYS,
        preferred_orientations: tuple[str, ...] = DEFAULT_ORIENTATIONS,
        request_options: RequestOptions | None = None,
        credential_provider: CredentialProvider | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._is_closing = False

        # The URL is checked before credentials so a bad link is always reported as such
        validate_vimeo_url(url)

        if credential_provider is None and request_options is None and config_credential_provider():
            credential_provider = config_credential_provider
        fetcher = VimeoConfigFetcher(credential_provider=credential_provider, request_options=request_options)

        self.controller = VimeoPlayerController(
            url,
            fetcher,
            session_factory=self._create_session,
            options=PlaybackOptions(
                start_at_ms=start_at_ms,
                autoplay=autoplay,
                system_ui_overlays=tuple(system_ui_overlays),
                preferred_orientations=tuple(preferred_orientations),
            ),
            on_progress=on_progress,
            on_finished=on_finished,
            on_unplayable=self._show_alert,
            on_session_ready=self._on_session_ready,
        )

        self._init_ui()

        self.runner = BackgroundFetchRunner(self)
        self.closeWatcher = WindowCloseWatcher(self, self.dispose)
        app = QCoreApplication.instance()
        if app is not None:
            app.aboutToQuit.connect(wait_for_detached_workers)

        self.controller.start(self.runner)

    def _init_ui(self) -> None:
        # QtMultimedia is only loaded once a player is actually built
        from qfluentwidgets.multimedia import VideoWidget

        self.vBoxLayout = QVBoxLayout(self)
        self.vBoxLayout.setContentsMargins(0, 0, 0, 0)

        self.loadingRing = IndeterminateProgressRing(self)
        self.loadingRing.setFixedSize(48, 48)
        self.videoWidget = VideoWidget(self)
        self.videoWidget.hide()

        self.vBoxLayout.addWidget(self.loadingRing, 0, Qt.AlignmentFlag.AlignCenter)
        self.vBoxLayout.addWidget(self.videoWidget, 1)

    def _create_session(self, stream_url: str, options: PlaybackOptions) -> PlaybackSession:
        from ..player.qt_session import QtPlaybackSession

        return QtPlaybackSession(stream_url, self.videoWidget, options)

    def _on_session_ready(self, _session: PlaybackSession) -> None:
        self.loadingRing.hide()
        self.videoWidget.show()

    def _show_alert(self, reason: UnplayableReason) -> None:
        info = describe_unplayable(reason)
        box = MessageBox(info["title"], info["content"], parent=self.window())
        box.yesButton.setText("OK")
        box.cancelButton.hide()
        box.exec()

    @property
    def session(self) -> PlaybackSession | None:
        return self.controller.session

    def dispose(self) -> None:
        if self._is_closing:
            return
        self._is_closing = True
        self.runner.close()
        self.controller.dispose()
        logger.debug("[VimeoPlayer] Widget disposed")

    def hideEvent(self, event) -> None:  # type: ignore[override]
        self.controller.pause()
        super().hideEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.dispose()
        super().closeEvent(event)
