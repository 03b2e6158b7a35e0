"""
Shared infrastructure: configuration and error types.
"""

from .config_manager import ConfigManager, config_credential_provider, config_manager, proxies_from_config
from .errors import (
    ConfigParseError,
    InvalidVimeoUrlError,
    MissingCredentialError,
    VideoIdExtractionError,
    VimeoPlayerError,
)

__all__ = [
    "ConfigManager",
    "config_manager",
    "config_credential_provider",
    "proxies_from_config",
    "VimeoPlayerError",
    "InvalidVimeoUrlError",
    "VideoIdExtractionError",
    "MissingCredentialError",
    "ConfigParseError",
]
