from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "VimeoPlayer"
DATA_DIR_ENV_VAR = "VIMEO_PLAYER_HOME"


def user_data_dir(app_name: str = APP_NAME) -> Path:
    # The package may live in a read-only site-packages, so everything the
    # player reads or writes goes under a per-user directory.
    override = os.environ.get(DATA_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    home = Path(os.path.expanduser("~"))
    return home / "Documents" / app_name


def config_path() -> Path:
    return user_data_dir() / "config.json"


def log_dir() -> Path:
    return user_data_dir() / "logs"
