"""
Vimeo player config fetcher.

Resolves a numeric video id into a parsed :class:`VimeoVideoConfig` with a
single authenticated GET against ``player.vimeo.com``. Every transport or
parse failure resolves to ``None``; callers treat that as "config
unavailable" and show the alert instead of crashing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import requests

from ..core.config_manager import config_manager, proxies_from_config
from ..core.errors import ConfigParseError, MissingCredentialError
from ..models.video_config import VimeoVideoConfig
from loguru import logger

VIMEO_CONFIG_URL = "https://player.vimeo.com/video/{video_id}/config"

CredentialProvider = Callable[[], str | None]


@dataclass
class RequestOptions:
    """Caller-supplied request settings.

    When given, these replace the default bearer header entirely.
    """

    headers: dict[str, str] = field(default_factory=dict)
    auth: Any = None
    cookies: dict[str, str] | None = None
    proxies: dict[str, str] | None = None
    timeout: float | None = None


def config_url(video_id: str) -> str:
    return VIMEO_CONFIG_URL.format(video_id=video_id)


class VimeoConfigFetcher:
    """Single-shot fetcher for the player config document.

    One of ``credential_provider`` or ``request_options`` is required; there
    is no built-in token.
    """

    def __init__(
        self,
        credential_provider: CredentialProvider | None = None,
        request_options: RequestOptions | None = None,
        session: requests.Session | None = None,
    ):
        if credential_provider is None and request_options is None:
            raise MissingCredentialError(
                "A Vimeo access token is required: pass credential_provider or request_options, "
                "or set vimeo_access_token in config.json"
            )
        self.credential_provider = credential_provider
        self.request_options = request_options
        self._session = session

    def _build_request_kwargs(self) -> dict[str, Any]:
        opts = self.request_options
        if opts is not None:
            kwargs: dict[str, Any] = {"headers": dict(opts.headers)}
            if opts.auth is not None:
                kwargs["auth"] = opts.auth
            if opts.cookies is not None:
                kwargs["cookies"] = dict(opts.cookies)
            proxies = opts.proxies if opts.proxies is not None else proxies_from_config()
            timeout = opts.timeout
        else:
            token = self.credential_provider() if self.credential_provider else None
            if not token:
                raise MissingCredentialError("credential provider returned no Vimeo access token")
            headers = {"Authorization": f"Bearer {token}"}
            user_agent = str(config_manager.get("user_agent") or "").strip()
            if user_agent:
                headers["User-Agent"] = user_agent
            kwargs = {"headers": headers}
            proxies = proxies_from_config()
            timeout = None

        if proxies is not None:
            kwargs["proxies"] = proxies
        if timeout is not None:
            kwargs["timeout"] = timeout
        return kwargs

    def fetch(self, video_id: str) -> VimeoVideoConfig | None:
        """
        Fetch and parse the config document for ``video_id``.

        Returns:
            The parsed config, or None if the token is missing, the request
            fails, or the body is not a usable config document.

        Raises:
            ValueError: If ``video_id`` is empty or not all digits.
        """
        if not video_id or not video_id.isdigit():
            raise ValueError(f"Invalid Vimeo video id: {video_id!r}")

        try:
            kwargs = self._build_request_kwargs()
        except MissingCredentialError as exc:
            logger.error("[VimeoConfig] {} (video {})", exc, video_id)
            return None

        url = config_url(video_id)
        logger.info("[VimeoConfig] Fetching player config: {}", url)

        session = self._session or requests.Session()
        try:
            response = session.get(url, **kwargs)
            response.raise_for_status()
            data = response.json()
            return VimeoVideoConfig.from_json(data)
        except requests.exceptions.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("[VimeoConfig] HTTP error for video {} (HTTP: {}): {}", video_id, status, exc)
        except (ValueError, ConfigParseError) as exc:
            logger.error("[VimeoConfig] Invalid config document for video {}: {}", video_id, exc)
        except requests.exceptions.RequestException as exc:
            logger.error("[VimeoConfig] Request failed for video {}: {}", video_id, exc)
        finally:
            if self._session is None:
                session.close()
        return None


def fetch_config(
    video_id: str,
    credential_provider: CredentialProvider | None = None,
    request_options: RequestOptions | None = None,
) -> VimeoVideoConfig | None:
    """Convenience wrapper around :meth:`VimeoConfigFetcher.fetch`."""
    fetcher = VimeoConfigFetcher(credential_provider=credential_provider, request_options=request_options)
    return fetcher.fetch(video_id)
