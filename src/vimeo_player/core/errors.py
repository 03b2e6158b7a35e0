"""Exception types raised by the Vimeo player."""

from __future__ import annotations


class VimeoPlayerError(Exception):
    """Base class for every error raised by this package."""


class InvalidVimeoUrlError(VimeoPlayerError):
    """The given string is not a recognised Vimeo video URL."""

    def __init__(self, url: str):
        super().__init__(f"Invalid Vimeo video url: {url}")
        self.url = url


class VideoIdExtractionError(VimeoPlayerError):
    """The URL looked like Vimeo but no video id could be extracted."""

    def __init__(self, url: str):
        super().__init__(f"Unable to extract video id from the given Vimeo video url: {url}")
        self.url = url


class MissingCredentialError(VimeoPlayerError):
    """No Vimeo access token or request options were supplied."""


class ConfigParseError(VimeoPlayerError):
    """The player config document does not have the expected shape."""
