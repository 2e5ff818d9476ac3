"""Minimal async client for the YouTube Data API v3."""

import logging
from typing import Any

import httpx

from youtube_mcp.config import EffectiveConfig
from youtube_mcp.errors import MissingAPIKeyError, NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"
API_KEY_HEADER = "X-Goog-Api-Key"


class YouTubeAPI:
    """Issues GET requests against the Data API with the configured key.

    A fresh ``httpx.AsyncClient`` is opened per request, so an instance holds
    no connections and needs no cleanup.
    """

    def __init__(
        self,
        config: EffectiveConfig,
        base_url: str = YOUTUBE_API_BASE,
        timeout: float = 30.0,
    ):
        self._config = config
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def get(self, resource: str, **params: Any) -> dict:
        if self._config.api_key is None:
            raise MissingAPIKeyError()

        query = {k: v for k, v in params.items() if v is not None}
        # The key must stay out of the URL, which httpx logs at INFO
        headers = {API_KEY_HEADER: self._config.api_key.get_secret_value()}

        logger.debug(f"GET {resource} {sorted(query)}")
        async with httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout) as client:
            try:
                resp = await client.get(f"/{resource}", params=query, headers=headers)
            except httpx.HTTPError as e:
                raise UpstreamError(f"Request to YouTube API failed: {e}") from e

        if resp.is_error:
            message = _error_message(resp)
            logger.warning(f"YouTube API {resource} returned {resp.status_code}: {message}")
            raise UpstreamError(
                f"YouTube API error {resp.status_code}: {message}",
                status_code=resp.status_code,
            )
        return resp.json()

    async def get_single(self, resource: str, kind: str, identifier: str, **params: Any) -> dict:
        """Fetch a ``*.list`` resource by id and return its only item."""
        data = await self.get(resource, **params)
        items = data.get("items") or []
        if not items:
            raise NotFoundError(kind, identifier)
        return items[0]


def _error_message(resp: httpx.Response) -> str:
    try:
        return resp.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return resp.reason_phrase or resp.text[:200]
