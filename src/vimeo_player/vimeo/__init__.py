"""
Vimeo module: player config fetching and stream selection.
"""

from .config_service import (
    VIMEO_CONFIG_URL,
    RequestOptions,
    VimeoConfigFetcher,
    config_url,
    fetch_config,
)
from .streams import progressive_streams, select_stream_url

__all__ = [
    "VIMEO_CONFIG_URL",
    "RequestOptions",
    "VimeoConfigFetcher",
    "config_url",
    "fetch_config",
    "progressive_streams",
    "select_stream_url",
]
