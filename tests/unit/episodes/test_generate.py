"""Tests for episode file generation."""

import json
from pathlib import Path

from careerlog.episodes.generate import (
    generate_episodes_file,
    load_existing_episodes,
    merge_episodes,
)
from careerlog.episodes.models import Platform
from careerlog.episodes.rss import parse_rss_episodes


class TestMergeEpisodes:
    """Tests for merge_episodes."""

    def test_new_episode_defaults(self, sample_rss_xml: str) -> None:
        """Test unseen GUIDs get empty URLs and an unposted flag."""
        merged = merge_episodes(parse_rss_episodes(sample_rss_xml), {})

        for episode in merged:
            assert all(episode.get_url(platform) == "" for platform in Platform)
            assert episode.new_episode_intro_posted_to_x is False

    def test_known_episode_keeps_urls_and_flag(self, sample_rss_xml: str, make_episode) -> None:
        """Test stored URLs and the posted flag carry over by GUID."""
        existing = make_episode(
            guid="guid-1",
            title="old title",
            spotify_url="https://open.spotify.com/episode/abc",
            apple_podcast_url="https://podcasts.apple.com/x",
            new_episode_intro_posted_to_x=True,
        )

        merged = merge_episodes(parse_rss_episodes(sample_rss_xml), {"guid-1": existing})
        first = next(episode for episode in merged if episode.guid == "guid-1")

        assert first.title == "#1 はじめまして"
        assert first.spotify_url == "https://open.spotify.com/episode/abc"
        assert first.apple_podcast_url == "https://podcasts.apple.com/x"
        assert first.youtube_url == ""
        assert first.new_episode_intro_posted_to_x is True

    def test_legacy_flag_absent_stays_absent(self, sample_rss_xml: str, make_episode) -> None:
        """Test a known record without the flag is not turned into an unposted one."""
        existing = make_episode(guid="guid-1")

        merged = merge_episodes(parse_rss_episodes(sample_rss_xml), {"guid-1": existing})
        first = next(episode for episode in merged if episode.guid == "guid-1")

        assert first.new_episode_intro_posted_to_x is None

    def test_keeps_feed_order(self, sample_rss_xml: str) -> None:
        """Test output follows the feed order."""
        merged = merge_episodes(parse_rss_episodes(sample_rss_xml), {})
        assert [episode.guid for episode in merged] == ["guid-2", "guid-1"]


class TestLoadExistingEpisodes:
    """Tests for load_existing_episodes."""

    def test_no_files(self, tmp_path: Path) -> None:
        """Test an empty directory gives an empty mapping."""
        assert load_existing_episodes(tmp_path) == {}

    def test_unreadable_file(self, tmp_path: Path) -> None:
        """Test a corrupt latest file gives an empty mapping."""
        (tmp_path / "20251103-0900-episodes.json").write_text("{broken")
        assert load_existing_episodes(tmp_path) == {}

    def test_keyed_by_guid(self, episodes_file: Path) -> None:
        """Test episodes are keyed by GUID."""
        existing = load_existing_episodes(episodes_file.parent)
        assert set(existing) == {"guid-1", "guid-2"}


class TestGenerateEpisodesFile:
    """Tests for generate_episodes_file."""

    def test_generates_and_reports_new(self, episodes_file: Path, rss_file: Path) -> None:
        """Test the output merges stored URLs and returns only new episodes."""
        records = json.loads(episodes_file.read_text(encoding="utf-8"))
        episodes_file.write_text(json.dumps(records[1:], ensure_ascii=False), encoding="utf-8")

        output = rss_file.parent / "20251104-0900-episodes.json"
        new_episodes = generate_episodes_file(rss_file, output)

        assert [episode.guid for episode in new_episodes] == ["guid-2"]

        written = json.loads(output.read_text(encoding="utf-8"))
        assert isinstance(written, list)
        assert [record["guid"] for record in written] == ["guid-2", "guid-1"]
        assert written[0]["newEpisodeIntroPostedToX"] is False
        assert written[1]["spotifyUrl"] == "https://open.spotify.com/episode/abc123"
        assert written[1]["newEpisodeIntroPostedToX"] is True

    def test_first_run(self, rss_file: Path) -> None:
        """Test every episode is new when no episodes file exists."""
        output = rss_file.parent / "20251104-0900-episodes.json"
        new_episodes = generate_episodes_file(rss_file, output)

        assert len(new_episodes) == 2
        assert output.exists()
