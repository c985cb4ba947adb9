"""Fill in missing platform URLs on stored episodes.

Each platform is handled independently: episodes that already carry its
URL are left alone, the platform's full listing is fetched at most once
per run, and every remaining episode is matched against that listing.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from careerlog.episodes.models import Episode, Platform
from careerlog.episodes.store import EpisodeStore
from careerlog.matching import find_match
from careerlog.platforms.base import EpisodeFetcher
from careerlog.utils.errors import AutomationError, EpisodeNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class PlatformReport:
    """Outcome of enrichment for one platform."""

    platform: Platform
    needed: int = 0
    updated: int = 0
    not_found: list[str] = field(default_factory=list)  # Episode titles
    skipped_reason: str | None = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None


@dataclass
class EnrichmentResult:
    episodes: list[Episode]
    reports: dict[Platform, PlatformReport] = field(default_factory=dict)

    @property
    def total_updated(self) -> int:
        return sum(report.updated for report in self.reports.values())

    @property
    def changed(self) -> bool:
        return self.total_updated > 0


async def enrich_missing_urls(
    episodes: list[Episode],
    fetchers: Sequence[EpisodeFetcher],
    guid: str | None = None,
    skipped: dict[Platform, str] | None = None,
) -> EnrichmentResult:
    """Match episodes lacking a platform URL against that platform's listing.

    Episodes are updated in place.

    Args:
        episodes: Episodes to enrich
        fetchers: One fetcher per platform to consult
        guid: Restrict enrichment to a single episode
        skipped: Platforms left out upstream (e.g. missing credentials) and why

    Returns:
        EnrichmentResult with a report per platform

    Raises:
        PlatformError: If a non-browser platform fails; browser automation
            failures only skip that platform
    """
    result = EnrichmentResult(episodes=episodes)

    for platform, reason in (skipped or {}).items():
        result.reports[platform] = PlatformReport(platform=platform, skipped_reason=reason)

    for fetcher in fetchers:
        platform = fetcher.platform
        report = PlatformReport(platform=platform)
        result.reports[platform] = report

        needing = [
            episode
            for episode in episodes
            if episode.needs_url(platform) and (guid is None or episode.guid == guid)
        ]
        report.needed = len(needing)

        if not needing:
            logger.info(f"{platform.label}: all episodes already have URLs")
            continue

        logger.info(f"{platform.label}: {len(needing)} episode(s) missing URLs")

        try:
            candidates = await fetcher.fetch_candidates()
        except AutomationError as e:
            logger.warning(f"Skipping {platform.label}: {e}")
            report.skipped_reason = str(e)
            continue

        for episode in needing:
            outcome = find_match(candidates, episode.title)
            if outcome is None:
                report.not_found.append(episode.title)
                logger.info(f"  ✗ {platform.label} URL not found: {episode.title}")
                continue

            episode.set_url(platform, outcome.url)
            report.updated += 1
            logger.info(
                f"  ✓ {platform.label} ({outcome.tier.value}): {episode.title} -> {outcome.url}"
            )

        logger.info(f"{platform.label}: updated {report.updated}/{report.needed} episodes")

    return result


async def enrich_store(
    store: EpisodeStore,
    fetchers: Sequence[EpisodeFetcher],
    guid: str | None = None,
    skipped: dict[Platform, str] | None = None,
) -> EnrichmentResult:
    """Enrich every episode in ``store`` and save only if something changed.

    Raises:
        EpisodeNotFoundError: If ``guid`` is given but not in the store
    """
    episodes = store.load()
    if guid is not None and not any(episode.guid == guid for episode in episodes):
        raise EpisodeNotFoundError(guid)

    result = await enrich_missing_urls(episodes, fetchers, guid=guid, skipped=skipped)

    if result.changed:
        store.save(result.episodes)
        logger.info(f"Saved {result.total_updated} new URL(s) to {store.path}")
    else:
        logger.info("No URLs found; store left unchanged")

    return result
