from __future__ import annotations

from ..models.video_config import VimeoProgressiveStream, VimeoVideoConfig


def progressive_streams(config: VimeoVideoConfig | None) -> list[VimeoProgressiveStream | None]:
    """Progressive descriptors in server order (empty when absent)."""
    if config is None:
        return []
    return list(config.progressive or [])


def select_stream_url(config: VimeoVideoConfig | None) -> str:
    """Return the first non-empty progressive URL, or "" when there is none.

    First match wins: later entries are never considered, regardless of quality.
    """
    for stream in progressive_streams(config):
        if stream is not None and stream.url:
            return stream.url
    return ""
