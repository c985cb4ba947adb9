"""YouTube Data API v3 fetcher."""

import logging
import re

import httpx

from careerlog.episodes.models import Platform
from careerlog.matching import PlatformCandidate
from careerlog.platforms.base import http_client, parse_json, raise_for_platform_status
from careerlog.utils.errors import EmptyResultError, PlatformError

logger = logging.getLogger(__name__)

API_BASE = "https://www.googleapis.com/youtube/v3"
PAGE_SIZE = 50

_CHANNEL_URL_PATTERNS = [
    re.compile(r"(@[^/?]+)"),
    re.compile(r"channel/([^/?]+)"),
    re.compile(r"/c/([^/?]+)"),
]


def extract_channel_id_from_url(url: str) -> str | None:
    """Pull a handle (``@name``), channel ID or custom name out of a channel URL."""
    for pattern in _CHANNEL_URL_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


class YouTubeFetcher:
    """Lists every video of a YouTube channel, newest first."""

    platform = Platform.YOUTUBE

    def __init__(
        self,
        api_key: str,
        channel: str,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            api_key: YouTube Data API key
            channel: Channel ID, or a handle starting with ``@``
            client: Optional shared HTTP client
        """
        self.api_key = api_key
        self.channel = channel
        self._client = client

    async def resolve_channel_id(self, client: httpx.AsyncClient) -> str:
        """Turn a ``@handle`` into a channel ID; IDs pass through unchanged.

        Raises:
            EmptyResultError: If no channel has that handle
        """
        if not self.channel.startswith("@"):
            return self.channel

        handle = self.channel[1:]
        response = await client.get(
            f"{API_BASE}/channels",
            params={"part": "id", "forHandle": handle, "key": self.api_key},
        )
        raise_for_platform_status(response, self.platform, "channel lookup")

        items = parse_json(response, self.platform).get("items") or []
        if not items:
            raise EmptyResultError(
                f"Channel not found for handle: {self.channel}", self.platform.value
            )

        channel_id = items[0]["id"]
        logger.debug(f"Resolved {self.channel} to channel {channel_id}")
        return channel_id

    async def fetch_candidates(self) -> list[PlatformCandidate]:
        """Fetch all channel videos, following ``nextPageToken``."""
        async with http_client(self._client) as client:
            try:
                channel_id = await self.resolve_channel_id(client)

                candidates: list[PlatformCandidate] = []
                page_token: str | None = None

                while True:
                    params = {
                        "part": "snippet",
                        "channelId": channel_id,
                        "type": "video",
                        "order": "date",
                        "maxResults": str(PAGE_SIZE),
                        "key": self.api_key,
                    }
                    if page_token:
                        params["pageToken"] = page_token

                    response = await client.get(f"{API_BASE}/search", params=params)
                    raise_for_platform_status(response, self.platform, "search request")
                    page = parse_json(response, self.platform)

                    for item in page.get("items") or []:
                        video_id = (item.get("id") or {}).get("videoId")
                        if not video_id:
                            continue
                        candidates.append(
                            PlatformCandidate(
                                title=(item.get("snippet") or {}).get("title") or "",
                                url=f"https://www.youtube.com/watch?v={video_id}",
                            )
                        )

                    page_token = page.get("nextPageToken")
                    if not page_token:
                        break

            except httpx.TransportError as e:
                raise PlatformError(
                    f"YouTube request failed: {e}", self.platform.value
                ) from e

        logger.info(f"Found {len(candidates)} videos on YouTube")
        return candidates
