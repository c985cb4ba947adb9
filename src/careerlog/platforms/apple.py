"""Apple Podcasts fetcher (public iTunes lookup/search API)."""

import logging
import re

import httpx
from pydantic import BaseModel, Field

from careerlog.episodes.models import Platform
from careerlog.matching import PlatformCandidate
from careerlog.platforms.base import http_client, parse_json, raise_for_platform_status
from careerlog.utils.errors import EmptyResultError, PlatformError

logger = logging.getLogger(__name__)

LOOKUP_URL = "https://itunes.apple.com/lookup"
SEARCH_URL = "https://itunes.apple.com/search"

_PODCAST_ID = re.compile(r"id(\d+)")


class PodcastSearchResult(BaseModel):
    """A show returned by the iTunes search API."""

    collection_id: int = Field(alias="collectionId")
    collection_name: str = Field(default="", alias="collectionName")
    artist_name: str = Field(default="", alias="artistName")
    collection_view_url: str = Field(default="", alias="collectionViewUrl")


def extract_podcast_id_from_url(url: str) -> str | None:
    """``https://podcasts.apple.com/jp/podcast/name/id1818019572`` -> ``1818019572``"""
    match = _PODCAST_ID.search(url)
    return match.group(1) if match else None


async def search_podcasts(
    term: str, limit: int = 10, client: httpx.AsyncClient | None = None
) -> list[PodcastSearchResult]:
    """Search shows by name; handy for discovering a podcast ID."""
    async with http_client(client) as http:
        try:
            response = await http.get(
                SEARCH_URL,
                params={
                    "term": term,
                    "media": "podcast",
                    "entity": "podcast",
                    "limit": str(limit),
                },
            )
        except httpx.TransportError as e:
            raise PlatformError(f"iTunes search failed: {e}", Platform.APPLE.value) from e

        raise_for_platform_status(response, Platform.APPLE, "search request")
        results = parse_json(response, Platform.APPLE).get("results") or []

    return [PodcastSearchResult.model_validate(result) for result in results]


class AppleFetcher:
    """Lists a show's episodes via a single lookup call. No credentials needed."""

    platform = Platform.APPLE

    def __init__(
        self,
        podcast_id: str,
        limit: int = 200,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.podcast_id = podcast_id
        self.limit = limit
        self._client = client

    async def fetch_candidates(self) -> list[PlatformCandidate]:
        """Fetch episodes for the podcast.

        Raises:
            EmptyResultError: If the lookup returns no results at all
        """
        async with http_client(self._client) as client:
            try:
                response = await client.get(
                    LOOKUP_URL,
                    params={
                        "id": self.podcast_id,
                        "entity": "podcastEpisode",
                        "limit": str(self.limit),
                    },
                )
            except httpx.TransportError as e:
                raise PlatformError(
                    f"iTunes lookup failed: {e}", self.platform.value
                ) from e

            raise_for_platform_status(response, self.platform, "lookup request")
            results = parse_json(response, self.platform).get("results") or []

        if not results:
            raise EmptyResultError(
                f"No episodes found for podcast ID: {self.podcast_id}",
                self.platform.value,
            )

        # The first result describes the show itself
        candidates = [
            PlatformCandidate(
                title=result.get("trackName") or "",
                url=result.get("trackViewUrl") or "",
            )
            for result in results[1:]
        ]

        logger.info(f"Found {len(candidates)} episodes on Apple Podcasts")
        return candidates
