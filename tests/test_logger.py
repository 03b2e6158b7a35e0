import importlib
import sys

from loguru import logger

import vimeo_player.utils.logger as player_logger


def test_import_leaves_host_logging_alone():
    hook = sys.excepthook
    messages = []
    sink_id = logger.add(lambda m: messages.append(str(m)), format="HOST {message}")
    try:
        importlib.reload(player_logger)
        importlib.reload(importlib.import_module("vimeo_player"))
        logger.info("host message")
    finally:
        logger.remove(sink_id)

    assert any("HOST host message" in m for m in messages)
    assert sys.excepthook is hook


def test_setup_logging_writes_into_the_given_directory(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    ids = player_logger.setup_logging(log_dir=tmp_path, console_level="ERROR")
    try:
        logger.info("written to file")
        logger.complete()
        assert sys.excepthook is player_logger.handle_exception
    finally:
        for handler_id in ids:
            logger.remove(handler_id)
        logger.add(sys.stderr)

    files = list(tmp_path.glob("player_*.log"))
    assert len(files) == 1
    assert "written to file" in files[0].read_text(encoding="utf-8")


def test_setup_logging_can_keep_the_excepthook(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    hook = sys.excepthook
    ids = player_logger.setup_logging(log_dir=tmp_path, install_excepthook=False)
    for handler_id in ids:
        logger.remove(handler_id)
    logger.add(sys.stderr)
    assert sys.excepthook is hook


def test_user_data_dir_can_be_redirected(tmp_path, monkeypatch):
    from vimeo_player.utils import paths

    monkeypatch.setenv(paths.DATA_DIR_ENV_VAR, str(tmp_path))
    assert paths.config_path() == tmp_path / "config.json"
    assert paths.log_dir() == tmp_path / "logs"
