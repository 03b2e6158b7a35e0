"""
vimeo_player - embeddable Vimeo video player widget for PySide6.

Resolves a Vimeo URL to a progressive MP4 stream through the player config
endpoint and plays it with qfluentwidgets' multimedia ``VideoWidget``.

Example usage:
    >>> from vimeo_player import is_vimeo_url, extract_video_id
    >>> is_vimeo_url("https://vimeo.com/76979871")
    True
    >>> extract_video_id("https://player.vimeo.com/video/76979871")
    '76979871'

The Qt widget itself lives in ``vimeo_player.ui`` so that the resolution
layers can be imported without a display.
"""

__version__ = "0.1.0"

from .core.errors import (
    ConfigParseError,
    InvalidVimeoUrlError,
    MissingCredentialError,
    VideoIdExtractionError,
    VimeoPlayerError,
)
from .models import VimeoProgressiveStream, VimeoVideoConfig
from .player.controller import PlayerState, UnplayableReason, VimeoPlayerController
from .player.session import PlaybackOptions, PlaybackSession, Subscription
from .utils.validators import VimeoUrlValidator, extract_video_id, is_vimeo_url
from .vimeo import RequestOptions, VimeoConfigFetcher, fetch_config, select_stream_url

__all__ = [
    "__version__",
    # Errors
    "VimeoPlayerError",
    "InvalidVimeoUrlError",
    "VideoIdExtractionError",
    "MissingCredentialError",
    "ConfigParseError",
    # URL matching
    "VimeoUrlValidator",
    "is_vimeo_url",
    "extract_video_id",
    # Config resolution
    "RequestOptions",
    "VimeoConfigFetcher",
    "fetch_config",
    "select_stream_url",
    "VimeoVideoConfig",
    "VimeoProgressiveStream",
    # Playback orchestration
    "PlaybackOptions",
    "PlaybackSession",
    "Subscription",
    "PlayerState",
    "UnplayableReason",
    "VimeoPlayerController",
]
