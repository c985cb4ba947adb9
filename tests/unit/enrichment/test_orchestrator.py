"""Tests for the enrichment orchestrator."""

import json
from pathlib import Path

import pytest

from careerlog.enrichment import enrich_missing_urls, enrich_store
from careerlog.episodes.models import Platform
from careerlog.episodes.store import EpisodeStore
from careerlog.matching import PlatformCandidate
from careerlog.utils.errors import AutomationError, EpisodeNotFoundError, PlatformError


class FakeFetcher:
    """Returns a fixed listing and counts how often it was asked."""

    def __init__(
        self,
        platform: Platform,
        candidates: list[tuple[str, str]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.platform = platform
        self.candidates = [PlatformCandidate(title=t, url=u) for t, u in candidates or []]
        self.error = error
        self.calls = 0

    async def fetch_candidates(self) -> list[PlatformCandidate]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.candidates


class TestEnrichMissingUrls:
    """Tests for enrich_missing_urls."""

    @pytest.mark.asyncio
    async def test_fetches_each_platform_once(self, make_episode) -> None:
        """Test one listing fetch serves every episode."""
        episodes = [make_episode(guid="g1", title="A"), make_episode(guid="g2", title="B")]
        fetcher = FakeFetcher(Platform.APPLE, [("A", "https://apple/a"), ("B", "https://apple/b")])

        result = await enrich_missing_urls(episodes, [fetcher])

        assert fetcher.calls == 1
        assert [e.apple_podcast_url for e in episodes] == ["https://apple/a", "https://apple/b"]
        assert result.reports[Platform.APPLE].updated == 2
        assert result.total_updated == 2

    @pytest.mark.asyncio
    async def test_platforms_are_independent(self, make_episode) -> None:
        """Test an existing URL on one platform does not stop another."""
        episode = make_episode(guid="g1", title="A", spotify_url="https://spotify/keep")
        spotify = FakeFetcher(Platform.SPOTIFY, [("A", "https://spotify/other")])
        youtube = FakeFetcher(Platform.YOUTUBE, [("A", "https://youtube/a")])

        result = await enrich_missing_urls([episode], [spotify, youtube])

        assert spotify.calls == 0
        assert episode.spotify_url == "https://spotify/keep"
        assert episode.youtube_url == "https://youtube/a"
        assert result.reports[Platform.SPOTIFY].needed == 0

    @pytest.mark.asyncio
    async def test_not_found_recorded(self, make_episode) -> None:
        """Test unmatched titles are reported and left empty."""
        episode = make_episode(guid="g1", title="#3 未公開")
        fetcher = FakeFetcher(Platform.APPLE, [("#1 はじめまして", "https://apple/1")])

        result = await enrich_missing_urls([episode], [fetcher])

        assert episode.apple_podcast_url == ""
        assert result.reports[Platform.APPLE].not_found == ["#3 未公開"]
        assert result.changed is False

    @pytest.mark.asyncio
    async def test_automation_error_skips_platform(self, make_episode) -> None:
        """Test a browser failure skips Amazon but keeps other results."""
        episode = make_episode(guid="g1", title="A")
        amazon = FakeFetcher(Platform.AMAZON, error=AutomationError("blocked", "amazon"))
        apple = FakeFetcher(Platform.APPLE, [("A", "https://apple/a")])

        result = await enrich_missing_urls([episode], [amazon, apple])

        assert result.reports[Platform.AMAZON].skipped
        assert result.reports[Platform.AMAZON].skipped_reason == "blocked"
        assert episode.apple_podcast_url == "https://apple/a"

    @pytest.mark.asyncio
    async def test_platform_error_propagates(self, make_episode) -> None:
        """Test API failures are not swallowed."""
        fetcher = FakeFetcher(Platform.SPOTIFY, error=PlatformError("boom", "spotify", 500))

        with pytest.raises(PlatformError, match="boom"):
            await enrich_missing_urls([make_episode(guid="g1")], [fetcher])

    @pytest.mark.asyncio
    async def test_guid_filter(self, make_episode) -> None:
        """Test only the requested episode is enriched."""
        episodes = [make_episode(guid="g1", title="A"), make_episode(guid="g2", title="B")]
        fetcher = FakeFetcher(Platform.APPLE, [("A", "https://apple/a"), ("B", "https://apple/b")])

        await enrich_missing_urls(episodes, [fetcher], guid="g2")

        assert episodes[0].apple_podcast_url == ""
        assert episodes[1].apple_podcast_url == "https://apple/b"

    @pytest.mark.asyncio
    async def test_skipped_platforms_reported(self, make_episode) -> None:
        """Test upstream skips appear in the reports."""
        result = await enrich_missing_urls(
            [make_episode()], [], skipped={Platform.YOUTUBE: "YOUTUBE_API_KEY not set"}
        )

        assert result.reports[Platform.YOUTUBE].skipped_reason == "YOUTUBE_API_KEY not set"


class TestEnrichStore:
    """Tests for enrich_store."""

    @pytest.mark.asyncio
    async def test_saves_when_changed(self, episodes_file: Path) -> None:
        """Test new URLs are written to the store."""
        fetcher = FakeFetcher(
            Platform.APPLE, [("#2 カナダで転職した話", "https://podcasts.apple.com/jp/2")]
        )

        result = await enrich_store(EpisodeStore(episodes_file), [fetcher])

        saved = json.loads(episodes_file.read_text(encoding="utf-8"))
        assert result.total_updated == 1
        assert saved[0]["applePodcastUrl"] == "https://podcasts.apple.com/jp/2"
        assert saved[1]["applePodcastUrl"] == "https://podcasts.apple.com/jp/podcast/id1?i=1"

    @pytest.mark.asyncio
    async def test_unchanged_store_not_written(self, episodes_file: Path) -> None:
        """Test the file is untouched when nothing matched."""
        before = episodes_file.stat().st_mtime_ns
        fetcher = FakeFetcher(Platform.APPLE, [])

        result = await enrich_store(EpisodeStore(episodes_file), [fetcher])

        assert result.changed is False
        assert episodes_file.stat().st_mtime_ns == before

    @pytest.mark.asyncio
    async def test_unknown_guid(self, episodes_file: Path) -> None:
        """Test an unknown GUID raises before any fetch."""
        fetcher = FakeFetcher(Platform.APPLE, [])

        with pytest.raises(EpisodeNotFoundError):
            await enrich_store(EpisodeStore(episodes_file), [fetcher], guid="nope")

        assert fetcher.calls == 0
