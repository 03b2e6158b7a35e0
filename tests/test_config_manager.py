from vimeo_player.core.config_manager import (
    TOKEN_ENV_VAR,
    config_credential_provider,
    proxies_from_config,
)


def test_no_token_configured():
    assert config_credential_provider() is None


def test_token_from_config_is_stripped(default_config):
    default_config["vimeo_access_token"] = "  abc  "
    assert config_credential_provider() == "abc"


def test_environment_overrides_config(default_config, monkeypatch):
    default_config["vimeo_access_token"] = "from-config"
    monkeypatch.setenv(TOKEN_ENV_VAR, "from-env")
    assert config_credential_provider() == "from-env"


def test_proxy_modes(default_config):
    default_config["proxy_mode"] = "system"
    assert proxies_from_config() is None

    default_config["proxy_mode"] = "off"
    assert proxies_from_config() == {"http": None, "https": None}

    default_config["proxy_mode"] = "socks5"
    default_config["proxy_url"] = "127.0.0.1:1080"
    assert proxies_from_config() == {"http": "socks5://127.0.0.1:1080", "https": "socks5://127.0.0.1:1080"}

    default_config["proxy_mode"] = "http"
    default_config["proxy_url"] = "http://proxy.local:3128"
    assert proxies_from_config()["https"] == "http://proxy.local:3128"

    default_config["proxy_url"] = ""
    assert proxies_from_config() is None


def test_reads_config_from_the_user_data_dir(tmp_path, monkeypatch):
    from vimeo_player.core.config_manager import ConfigManager
    from vimeo_player.utils.paths import DATA_DIR_ENV_VAR

    monkeypatch.setenv(DATA_DIR_ENV_VAR, str(tmp_path))
    (tmp_path / "config.json").write_text('{"proxy_mode": "SOCKS5", "proxy_url": "h:1"}', encoding="utf-8")

    manager = object.__new__(ConfigManager)
    manager._init()

    assert manager.config_file == tmp_path / "config.json"
    assert manager.get("proxy_mode") == "socks5"
    assert manager.get("vimeo_access_token") == ""
    assert [p.name for p in tmp_path.iterdir()] == ["config.json"]
