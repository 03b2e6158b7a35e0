import os
import sys

import pytest

# Add src to pythonpath
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from vimeo_player.core.config_manager import TOKEN_ENV_VAR, ConfigManager, config_manager  # noqa: E402


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Run every test against the default config, whatever config.json holds."""
    monkeypatch.setattr(config_manager, "config", dict(ConfigManager.DEFAULT_CONFIG))
    monkeypatch.delenv(TOKEN_ENV_VAR, raising=False)
    return config_manager.config


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
