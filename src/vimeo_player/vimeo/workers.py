from __future__ import annotations

import threading
from typing import Callable

from loguru import logger
from PySide6.QtCore import QObject, QThread, Signal

from ..models.video_config import VimeoVideoConfig

# Workers whose owner went away while the request was in flight; kept alive
# until their thread finishes so Qt never destroys a running QThread.
_detached_workers: set["ConfigFetchWorker"] = set()

QUIT_WAIT_MS = 5000


class ConfigFetchWorker(QThread):
    """Runs the config fetch off the UI thread and reports the result once."""

    resolved = Signal(object)  # VimeoVideoConfig | None

    def __init__(self, task: Callable[[], VimeoVideoConfig | None]):
        super().__init__()
        self.task = task
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        # The HTTP request itself is not aborted; its result is dropped.
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run(self) -> None:
        try:
            config = self.task()
        except Exception:
            logger.exception("[VimeoConfig] Config fetch crashed")
            config = None
        if self._cancel_event.is_set():
            return
        self.resolved.emit(config)


def detached_worker_count() -> int:
    return len(_detached_workers)


def wait_for_detached_workers(timeout_ms: int = QUIT_WAIT_MS) -> None:
    """Give in-flight fetches a bounded chance to finish (called on app quit)."""
    for w in list(_detached_workers):
        if w.isRunning() and not w.wait(timeout_ms):
            logger.warning("[VimeoConfig] Fetch worker still running at quit")
        _detached_workers.discard(w)


class BackgroundFetchRunner(QObject):
    """Fetch runner that hands the task to a ``ConfigFetchWorker``.

    After ``close()`` no callback is ever delivered, even if the worker's
    result was already queued.
    """

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self.worker: ConfigFetchWorker | None = None
        self._pending_callback: Callable[[VimeoVideoConfig | None], None] | None = None
        self._is_closing = False

    def __call__(
        self,
        task: Callable[[], VimeoVideoConfig | None],
        callback: Callable[[VimeoVideoConfig | None], None],
    ) -> None:
        if self._is_closing:
            return
        self._pending_callback = callback
        w = ConfigFetchWorker(task)
        w.resolved.connect(self._on_resolved)
        self.worker = w
        w.start()

    def _on_resolved(self, config: VimeoVideoConfig | None) -> None:
        if self._is_closing:
            return
        callback, self._pending_callback = self._pending_callback, None
        if callback is not None:
            callback(config)

    @property
    def is_closed(self) -> bool:
        return self._is_closing

    def close(self) -> None:
        if self._is_closing:
            return
        self._is_closing = True
        self._pending_callback = None

        w = self.worker
        self.worker = None
        if w is None:
            return
        try:
            w.resolved.disconnect(self._on_resolved)
        except (RuntimeError, TypeError):
            pass
        w.cancel()

        _detached_workers.add(w)
        w.finished.connect(lambda: _detached_workers.discard(w))
        if not w.isRunning():
            _detached_workers.discard(w)
