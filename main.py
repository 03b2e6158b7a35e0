from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger
from PySide6.QtWidgets import QApplication, QMainWindow

DEMO_URL = "https://vimeo.com/76979871"


def main() -> None:
    # Ensure "src" is importable when running from repo root
    root_dir = Path(__file__).resolve().parent
    src_dir = root_dir / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from vimeo_player.utils.logger import setup_logging

    setup_logging()

    app = QApplication(sys.argv)

    # Import after QApplication exists to avoid Qt font warnings at import time.
    from qfluentwidgets import MessageBox

    from vimeo_player import VimeoPlayerError
    from vimeo_player.ui import VimeoVideoPlayer
    from vimeo_player.utils.translator import translate_error

    url = sys.argv[1] if len(sys.argv) > 1 else DEMO_URL

    window = QMainWindow()
    window.setWindowTitle("Vimeo Player")
    window.resize(960, 600)

    try:
        player = VimeoVideoPlayer(
            url,
            autoplay=True,
            on_progress=lambda pos: logger.debug("position: {} ms", pos),
            on_finished=lambda: logger.info("playback finished"),
            parent=window,
        )
    except VimeoPlayerError as exc:
        info = translate_error(exc)
        box = MessageBox(info["title"], f"{info['content']}\n\n{info['suggestion']}", window)
        box.cancelButton.hide()
        box.exec()
        sys.exit(1)

    window.setCentralWidget(player)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
