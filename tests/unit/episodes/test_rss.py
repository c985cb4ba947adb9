"""Tests for regex RSS parsing."""

import re
from datetime import datetime, timezone

from careerlog.episodes.rss import (
    extract_text,
    extract_with_regex,
    parse_channel_info,
    parse_feed,
    parse_rss_episodes,
)


class TestExtractText:
    """Tests for extract_text."""

    def test_unwraps_cdata(self) -> None:
        """Test CDATA wrapper is removed."""
        assert extract_text("<![CDATA[ hello ]]>") == "hello"

    def test_plain_text_trimmed(self) -> None:
        """Test plain text is trimmed."""
        assert extract_text("  hello  ") == "hello"

    def test_empty(self) -> None:
        """Test None and empty input give empty string."""
        assert extract_text(None) == ""
        assert extract_text("") == ""


class TestExtractWithRegex:
    """Tests for extract_with_regex."""

    def test_no_match(self) -> None:
        """Test missing tag gives empty string."""
        assert extract_with_regex("<item></item>", re.compile(r"<title>(.*?)</title>")) == ""

    def test_strips_tags_and_decodes_entities(self) -> None:
        """Test HTML is removed and basic entities decoded."""
        text = "<description><![CDATA[<b>Q&amp;A</b> &quot;1&quot; &#39;x&#39;]]></description>"
        pattern = re.compile(r"<description>(.*?)</description>", re.DOTALL)
        assert extract_with_regex(text, pattern) == "Q&A \"1\" 'x'"

    def test_truncates_at_guest_marker(self) -> None:
        """Test everything from the guest credit onwards is dropped."""
        text = "<description>本編の説明 ゲスト：山田さん</description>"
        pattern = re.compile(r"<description>(.*?)</description>")
        assert extract_with_regex(text, pattern) == "本編の説明"


class TestParseRssEpisodes:
    """Tests for parse_rss_episodes."""

    def test_parses_items_in_order(self, sample_rss_xml: str) -> None:
        """Test every item becomes an episode, feed order kept."""
        episodes = parse_rss_episodes(sample_rss_xml)

        assert [episode.guid for episode in episodes] == ["guid-2", "guid-1"]

    def test_episode_fields(self, sample_rss_xml: str) -> None:
        """Test fields are extracted and cleaned."""
        latest = parse_rss_episodes(sample_rss_xml)[0]

        assert latest.title == "#2 カナダで転職した話"
        assert latest.description == "転職の裏側を話しました。"
        assert latest.link == "https://example.com/episodes/2"
        assert latest.date == "Mon, 03 Nov 2025 08:00:00 GMT"
        assert latest.duration == "01:05:30"
        assert latest.audio_url == "https://example.com/audio/2.mp3"
        assert latest.spotify_url == ""
        assert latest.new_episode_intro_posted_to_x is None

    def test_entities_in_description(self, sample_rss_xml: str) -> None:
        """Test encoded description text is decoded."""
        first = parse_rss_episodes(sample_rss_xml)[1]
        assert first.description == "Q&A <前編>"

    def test_no_items(self) -> None:
        """Test a feed without items yields nothing."""
        assert parse_rss_episodes("<rss><channel></channel></rss>") == []


class TestParseChannel:
    """Tests for channel parsing."""

    def test_channel_info(self, sample_rss_xml: str) -> None:
        """Test channel-level fields come from the channel, not items."""
        channel = parse_channel_info(sample_rss_xml)

        assert channel.title == "海外キャリアログ"
        assert channel.description == "海外で働く人たちのキャリアを語るポッドキャスト"
        assert channel.link == "https://kaigaicareerlog.com"
        assert channel.language == "ja"
        assert channel.image == "https://example.com/cover.jpg"

    def test_parse_feed_document(self, sample_rss_xml: str) -> None:
        """Test the whole-feed document shape."""
        now = datetime(2025, 11, 3, 9, 0, tzinfo=timezone.utc)
        document = parse_feed(sample_rss_xml, now=now).to_json_dict()

        assert document["channel"]["title"] == "海外キャリアログ"
        assert document["lastUpdated"] == "2025-11-03T09:00:00Z"
        assert len(document["episodes"]) == 2
        assert set(document["episodes"][0]) == {
            "title",
            "description",
            "link",
            "guid",
            "date",
            "duration",
            "audioUrl",
        }
