"""Spotify Web API fetcher (client-credentials flow)."""

import base64
import logging
import re

import httpx

from careerlog.episodes.models import Platform
from careerlog.matching import PlatformCandidate
from careerlog.platforms.base import http_client, parse_json, raise_for_platform_status
from careerlog.utils.errors import PlatformAuthError, PlatformError

logger = logging.getLogger(__name__)

TOKEN_URL = "https://accounts.spotify.com/api/token"
API_BASE = "https://api.spotify.com/v1"
PAGE_SIZE = 50

_EPISODE_URL = re.compile(r"^https://open\.spotify\.com/episode/([a-zA-Z0-9]+)")


def is_valid_spotify_episode_url(url: str) -> bool:
    return bool(_EPISODE_URL.match(url))


def get_spotify_embed_url(url: str) -> str | None:
    """Convert an episode URL into its embeddable player URL."""
    match = _EPISODE_URL.match(url)
    if not match:
        return None
    return f"https://open.spotify.com/embed/episode/{match.group(1)}"


class SpotifyFetcher:
    """Lists every episode of a Spotify show."""

    platform = Platform.SPOTIFY

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        show_id: str,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.show_id = show_id
        self._client = client

    async def get_access_token(self, client: httpx.AsyncClient) -> str:
        """Exchange client credentials for a bearer token.

        Raises:
            PlatformAuthError: If Spotify rejects the credentials
        """
        basic = base64.b64encode(
            f"{self.client_id}:{self.client_secret}".encode()
        ).decode()

        response = await client.post(
            TOKEN_URL,
            data={"grant_type": "client_credentials"},
            headers={"Authorization": f"Basic {basic}"},
        )
        if not response.is_success:
            raise PlatformAuthError(
                f"Failed to get Spotify access token: {response.status_code} - {response.text}",
                self.platform.value,
                response.status_code,
            )

        token = parse_json(response, self.platform).get("access_token")
        if not token:
            raise PlatformAuthError(
                "Spotify token response did not include an access token",
                self.platform.value,
            )
        return token

    async def fetch_candidates(self) -> list[PlatformCandidate]:
        """Fetch all show episodes, following the ``next`` cursor."""
        async with http_client(self._client) as client:
            try:
                token = await self.get_access_token(client)
                logger.debug("Authenticated with Spotify")

                candidates: list[PlatformCandidate] = []
                url: str | None = f"{API_BASE}/shows/{self.show_id}/episodes?limit={PAGE_SIZE}"

                while url:
                    response = await client.get(
                        url, headers={"Authorization": f"Bearer {token}"}
                    )
                    raise_for_platform_status(response, self.platform, "show episodes request")
                    page = parse_json(response, self.platform)

                    for item in page.get("items") or []:
                        if not item:
                            continue
                        candidates.append(
                            PlatformCandidate(
                                title=item.get("name") or "",
                                url=(item.get("external_urls") or {}).get("spotify") or "",
                            )
                        )
                    url = page.get("next")

            except httpx.TransportError as e:
                raise PlatformError(
                    f"Spotify request failed: {e}", self.platform.value
                ) from e

        logger.info(f"Found {len(candidates)} episodes on Spotify")
        return candidates
