from __future__ import annotations

import json
import os
from typing import Any

from ..utils.paths import config_path

TOKEN_ENV_VAR = "VIMEO_ACCESS_TOKEN"


class ConfigManager:
    """Configuration singleton, loaded once from the per-user config.json."""

    _instance: "ConfigManager | None" = None

    DEFAULT_CONFIG: dict[str, Any] = {
        # Bearer token for player.vimeo.com/video/<id>/config.
        # Empty means "not configured"; VIMEO_ACCESS_TOKEN overrides it.
        "vimeo_access_token": "",
        # Proxy mode:
        # - off: do NOT use system/ambient proxy
        # - system: follow system/ambient proxy settings
        # - http: manual HTTP proxy (proxy_url is host:port or URL)
        # - socks5: manual SOCKS5 proxy (proxy_url is host:port or URL)
        "proxy_mode": "system",
        "proxy_url": "",
        # Empty means the requests default User-Agent
        "user_agent": "",
    }

    def __new__(cls) -> "ConfigManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init()
        return cls._instance

    def _init(self) -> None:
        self.config_file = config_path()
        self.config: dict[str, Any] = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return self.DEFAULT_CONFIG.copy()

        try:
            data = json.loads(self.config_file.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return self.DEFAULT_CONFIG.copy()
        if not isinstance(data, dict):
            return self.DEFAULT_CONFIG.copy()

        # Merge over defaults so keys added in newer versions are present
        merged = {**self.DEFAULT_CONFIG, **data}

        pm = str(merged.get("proxy_mode") or "off").lower().strip()
        if pm not in {"off", "system", "http", "socks5"}:
            pm = "off"
        merged["proxy_mode"] = pm
        return merged

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)


config_manager = ConfigManager()


def config_credential_provider() -> str | None:
    """Return the configured Vimeo access token, or None when there is none."""
    token = os.environ.get(TOKEN_ENV_VAR) or config_manager.get("vimeo_access_token")
    if token and isinstance(token, str) and token.strip():
        return token.strip()
    return None


def proxies_from_config() -> dict[str, str] | None:
    """Translate the proxy settings into a requests ``proxies`` mapping.

    ``None`` means "let requests follow the environment" (system mode).
    """
    mode = str(config_manager.get("proxy_mode") or "off").lower().strip()
    if mode == "system":
        return None
    if mode == "off":
        # requests skips env proxies for a scheme mapped to None
        return {"http": None, "https": None}  # type: ignore[dict-item]

    proxy_url = str(config_manager.get("proxy_url") or "").strip()
    if not proxy_url:
        return None
    if "://" not in proxy_url:
        scheme = "socks5" if mode == "socks5" else "http"
        proxy_url = f"{scheme}://{proxy_url}"
    return {"http": proxy_url, "https": proxy_url}
