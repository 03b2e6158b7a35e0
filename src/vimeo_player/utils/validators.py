from __future__ import annotations

import re


class VimeoUrlValidator:
    """Vimeo URL validation and video id extraction."""

    # Covers vimeo.com/<id>, player.vimeo.com/video/<id>, channels and groups.
    # The whole string must match; the id is the run of digits after the path prefix.
    VIMEO_REGEX = re.compile(
        r"(?:http|https)?:?/?/?(?:www\.)?(?:player\.)?vimeo\.com/"
        r"(?:channels/(?:\w+/)?|groups/[^/]*/videos/|video/|)"
        r"(\d+)"
        r"(?:/?(?:\?\S*)?)?",
        re.IGNORECASE,
    )

    @staticmethod
    def _match(text: str) -> re.Match[str] | None:
        if not text:
            return None
        return VimeoUrlValidator.VIMEO_REGEX.fullmatch(text.strip())

    @staticmethod
    def is_vimeo_url(text: str) -> bool:
        return VimeoUrlValidator._match(text) is not None

    @staticmethod
    def extract_video_id(text: str) -> str | None:
        """Return the numeric video id, or None when the URL has none."""
        match = VimeoUrlValidator._match(text)
        if match is None:
            return None
        return match.group(1) or None


def is_vimeo_url(url: str) -> bool:
    """
    Check whether ``url`` is a Vimeo video URL.

    Example:
        >>> is_vimeo_url("https://vimeo.com/76979871")
        True
        >>> is_vimeo_url("https://example.com/video/123")
        False
    """
    return VimeoUrlValidator.is_vimeo_url(url)


def extract_video_id(url: str) -> str | None:
    """
    Extract the Vimeo video id from ``url``.

    Example:
        >>> extract_video_id("https://player.vimeo.com/video/76979871")
        '76979871'
    """
    return VimeoUrlValidator.extract_video_id(url)
