"""Manual URL maintenance for episodes the matcher could not resolve."""

import logging
from typing import Any

from pydantic import BaseModel, Field

from careerlog.episodes.models import Episode, Platform
from careerlog.utils.errors import EpisodeNotFoundError

logger = logging.getLogger(__name__)


class PlatformUrls(BaseModel):
    """URLs to set on one episode. ``None`` leaves a platform untouched."""

    spotify: str | None = None
    youtube: str | None = None
    apple: str | None = None
    amazon: str | None = None

    def provided(self) -> dict[Platform, str]:
        return {
            platform: value
            for platform in Platform
            if (value := getattr(self, platform.value)) is not None
        }


class EpisodeUpdate(BaseModel):
    """One entry of a batch update file (camelCase keys, as written by hand)."""

    guid: str = ""
    spotify_url: str | None = Field(default=None, alias="spotifyUrl")
    youtube_url: str | None = Field(default=None, alias="youtubeUrl")
    apple_podcast_url: str | None = Field(default=None, alias="applePodcastUrl")
    amazon_music_url: str | None = Field(default=None, alias="amazonMusicUrl")

    def to_platform_urls(self) -> PlatformUrls:
        return PlatformUrls(
            spotify=self.spotify_url,
            youtube=self.youtube_url,
            apple=self.apple_podcast_url,
            amazon=self.amazon_music_url,
        )


def update_episode_urls(
    episodes: list[Episode], guid: str, urls: PlatformUrls
) -> Episode:
    """Set the provided platform URLs on the episode with ``guid``.

    Raises:
        ValueError: If no URL was provided
        EpisodeNotFoundError: If the GUID is unknown
    """
    provided = urls.provided()
    if not provided:
        raise ValueError(
            "At least one URL must be provided (--spotify, --youtube, --apple, --amazon)"
        )

    for episode in episodes:
        if episode.guid == guid:
            for platform, url in provided.items():
                episode.set_url(platform, url)
                logger.info(f"{platform.label}: {url}")
            return episode

    raise EpisodeNotFoundError(guid)


def apply_batch_updates(
    episodes: list[Episode], updates: list[dict[str, Any]]
) -> list[str]:
    """Apply many URL updates, skipping bad entries with a warning.

    Returns:
        GUIDs of episodes that were updated
    """
    by_guid = {episode.guid: episode for episode in episodes}
    updated = []

    for raw in updates:
        update = EpisodeUpdate.model_validate(raw)
        if not update.guid:
            logger.warning("Skipping update without guid")
            continue

        episode = by_guid.get(update.guid)
        if episode is None:
            logger.warning(f"Episode not found: {update.guid}")
            continue

        for platform, url in update.to_platform_urls().provided().items():
            episode.set_url(platform, url)
        updated.append(update.guid)
        logger.info(f"Updated: {episode.title}")

    return updated
