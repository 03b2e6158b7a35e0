"""Typed model of the Vimeo player config document.

Only the parts the player needs are modelled; everything else in the JSON is
ignored. Every field is optional because the endpoint omits whatever does not
apply to a given video.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.errors import ConfigParseError


def _opt_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _opt_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(slots=True)
class VimeoProgressiveStream:
    """One progressive-download (single file MP4) variant."""

    url: str | None = None
    quality: str | None = None
    width: int | None = None
    height: int | None = None
    fps: int | None = None
    mime: str | None = None
    cdn: str | None = None
    profile: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "VimeoProgressiveStream":
        return cls(
            url=_opt_str(data.get("url")),
            quality=_opt_str(data.get("quality")),
            width=_opt_int(data.get("width")),
            height=_opt_int(data.get("height")),
            fps=_opt_int(data.get("fps")),
            mime=_opt_str(data.get("mime")),
            cdn=_opt_str(data.get("cdn")),
            profile=_opt_str(data.get("profile")),
        )


@dataclass(slots=True)
class VimeoFiles:
    # Entries keep server order; malformed entries are kept as None so that
    # positions still line up with the raw document.
    progressive: list[VimeoProgressiveStream | None] | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "VimeoFiles":
        raw = data.get("progressive")
        if raw is None:
            return cls(progressive=None)
        if not isinstance(raw, list):
            raise ConfigParseError("'request.files.progressive' is not a list")
        streams = [
            VimeoProgressiveStream.from_json(item) if isinstance(item, dict) else None
            for item in raw
        ]
        return cls(progressive=streams)


@dataclass(slots=True)
class VimeoRequest:
    files: VimeoFiles | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "VimeoRequest":
        files = data.get("files")
        return cls(files=VimeoFiles.from_json(files) if isinstance(files, dict) else None)


@dataclass(slots=True)
class VimeoVideoMeta:
    id: str | None = None
    title: str | None = None
    duration: int | None = None
    width: int | None = None
    height: int | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "VimeoVideoMeta":
        return cls(
            id=_opt_str(data.get("id")),
            title=_opt_str(data.get("title")),
            duration=_opt_int(data.get("duration")),
            width=_opt_int(data.get("width")),
            height=_opt_int(data.get("height")),
        )


@dataclass(slots=True)
class VimeoVideoConfig:
    request: VimeoRequest | None = None
    video: VimeoVideoMeta | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_json(cls, data: Any) -> "VimeoVideoConfig":
        if not isinstance(data, dict):
            raise ConfigParseError(f"config document must be a JSON object, got {type(data).__name__}")
        request = data.get("request")
        video = data.get("video")
        return cls(
            request=VimeoRequest.from_json(request) if isinstance(request, dict) else None,
            video=VimeoVideoMeta.from_json(video) if isinstance(video, dict) else None,
            raw=data,
        )

    @property
    def progressive(self) -> list[VimeoProgressiveStream | None] | None:
        if self.request is None or self.request.files is None:
            return None
        return self.request.files.progressive
