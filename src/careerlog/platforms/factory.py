"""Build the set of fetchers this process can actually run."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import httpx

from careerlog.config.credentials import Credentials
from careerlog.config.schema import GlobalConfig
from careerlog.episodes.models import Platform
from careerlog.matching import match_title
from careerlog.platforms.amazon import AmazonMusicFetcher
from careerlog.platforms.apple import AppleFetcher
from careerlog.platforms.base import EpisodeFetcher
from careerlog.platforms.spotify import SpotifyFetcher
from careerlog.platforms.youtube import YouTubeFetcher

logger = logging.getLogger(__name__)


@dataclass
class FetcherSelection:
    """Runnable fetchers plus the platforms left out and why."""

    fetchers: list[EpisodeFetcher] = field(default_factory=list)
    skipped: dict[Platform, str] = field(default_factory=dict)


def build_fetchers(
    config: GlobalConfig,
    credentials: Credentials,
    platforms: Iterable[Platform] | None = None,
    client: httpx.AsyncClient | None = None,
) -> FetcherSelection:
    """Create a fetcher for every requested platform that has what it needs.

    Platforms without credentials are recorded in ``skipped`` rather than
    failing; Apple and Amazon need none.
    """
    wanted = list(platforms) if platforms is not None else list(Platform)
    selection = FetcherSelection()

    for platform in wanted:
        if platform is Platform.SPOTIFY:
            if not credentials.has_spotify:
                selection.skipped[platform] = (
                    "SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET not set"
                )
                continue
            selection.fetchers.append(
                SpotifyFetcher(
                    credentials.spotify_client_id or "",
                    credentials.spotify_client_secret or "",
                    config.spotify.show_id,
                    client=client,
                )
            )
        elif platform is Platform.YOUTUBE:
            if not credentials.has_youtube:
                selection.skipped[platform] = "YOUTUBE_API_KEY not set"
                continue
            selection.fetchers.append(
                YouTubeFetcher(
                    credentials.youtube_api_key or "", config.youtube.channel, client=client
                )
            )
        elif platform is Platform.APPLE:
            selection.fetchers.append(
                AppleFetcher(
                    config.apple.podcast_id, limit=config.apple.episode_limit, client=client
                )
            )
        elif platform is Platform.AMAZON:
            selection.fetchers.append(AmazonMusicFetcher(config.amazon))

    for platform, reason in selection.skipped.items():
        logger.warning(f"Skipping {platform.label}: {reason}")

    return selection


async def find_episode_url(fetcher: EpisodeFetcher, title: str) -> str | None:
    """Look up a single title on one platform."""
    candidates = await fetcher.fetch_candidates()
    return match_title(candidates, title)
