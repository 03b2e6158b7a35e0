"""
Data models shared across the player.
"""

from .video_config import (
    VimeoFiles,
    VimeoProgressiveStream,
    VimeoRequest,
    VimeoVideoConfig,
    VimeoVideoMeta,
)

__all__ = [
    "VimeoFiles",
    "VimeoProgressiveStream",
    "VimeoRequest",
    "VimeoVideoConfig",
    "VimeoVideoMeta",
]
