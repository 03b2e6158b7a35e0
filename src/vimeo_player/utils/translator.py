from __future__ import annotations

from ..core.errors import InvalidVimeoUrlError, MissingCredentialError, VideoIdExtractionError

ALERT_TITLE = "Alert"
ALERT_CONTENT = "Something went wrong with this URL"


def translate_error(error: BaseException) -> dict:
    """Turn an exception into a user-facing error dict.

    Keys are stable: title/content/suggestion/raw_error.
    """

    raw = str(error)

    result = {
        "title": ALERT_TITLE,
        "content": ALERT_CONTENT,
        "suggestion": "1. Try again later\n2. Check the log file for details",
        "raw_error": raw,
    }

    if isinstance(error, (InvalidVimeoUrlError, VideoIdExtractionError)):
        result["title"] = "Invalid Vimeo link"
        result["content"] = "The link is not a recognised Vimeo video address."
        result["suggestion"] = (
            "Use a link like https://vimeo.com/76979871 or "
            "https://player.vimeo.com/video/76979871."
        )
        return result

    if isinstance(error, MissingCredentialError):
        result["title"] = "Vimeo access token missing"
        result["content"] = "No Vimeo access token is configured for this player."
        result["suggestion"] = (
            "Set vimeo_access_token in config.json, export VIMEO_ACCESS_TOKEN, "
            "or pass request options with an Authorization header."
        )
        return result

    return result


def describe_unplayable(reason: object | None = None) -> dict:
    """Alert text for a video that resolved to no playable stream.

    Config failures and empty stream lists look the same to the user.
    """
    return {
        "title": ALERT_TITLE,
        "content": ALERT_CONTENT,
        "suggestion": "",
        "raw_error": str(getattr(reason, "value", reason) or ""),
    }
