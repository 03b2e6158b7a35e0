from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QCoreApplication, QEvent, QObject
from PySide6.QtWidgets import QWidget


class WindowCloseWatcher(QObject):
    """Calls ``on_close`` once when the widget's top-level window closes.

    An embedded widget never gets its own ``closeEvent``, so the watcher
    filters events on the current window (re-attaching when the widget is
    reparented) and also reacts to deletion and application quit.
    """

    _TRIGGERS = (QEvent.Type.Close, QEvent.Type.DeferredDelete)

    def __init__(self, widget: QWidget, on_close: Callable[[], None]):
        super().__init__(widget)
        self._widget = widget
        self._on_close = on_close
        self._window: QWidget | None = None
        self._fired = False

        widget.installEventFilter(self)
        self._attach_window()

        app = QCoreApplication.instance()
        if app is not None:
            app.aboutToQuit.connect(self.fire)

    @property
    def fired(self) -> bool:
        return self._fired

    def _attach_window(self) -> None:
        window = self._widget.window()
        if window is self._window:
            return
        if self._window is not None and self._window is not self._widget:
            self._window.removeEventFilter(self)
        self._window = window
        if window is not self._widget:
            window.installEventFilter(self)

    def eventFilter(self, watched, event) -> bool:  # type: ignore[override]
        etype = event.type()
        if watched is self._widget and etype in (QEvent.Type.ParentChange, QEvent.Type.Show):
            self._attach_window()
        if etype in self._TRIGGERS and (watched is self._window or watched is self._widget):
            self.fire()
        return False

    def fire(self) -> None:
        if self._fired:
            return
        self._fired = True
        if self._window is not None and self._window is not self._widget:
            self._window.removeEventFilter(self)
        self._on_close()
