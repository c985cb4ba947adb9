"""Shared fixtures for careerlog tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from careerlog.episodes.models import Episode

SAMPLE_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">
<channel>
<title><![CDATA[海外キャリアログ]]></title>
<description><![CDATA[海外で働く人たちのキャリアを語るポッドキャスト]]></description>
<link>https://kaigaicareerlog.com</link>
<language>ja</language>
<itunes:image href="https://example.com/cover.jpg"/>
<item>
<title><![CDATA[#2 カナダで転職した話]]></title>
<description><![CDATA[<p>転職の裏側を話しました。</p>
<p>ゲスト：Taro</p>]]></description>
<link>https://example.com/episodes/2</link>
<guid isPermaLink="false">guid-2</guid>
<pubDate>Mon, 03 Nov 2025 08:00:00 GMT</pubDate>
<itunes:duration>01:05:30</itunes:duration>
<enclosure url="https://example.com/audio/2.mp3" length="123" type="audio/mpeg"/>
</item>
<item>
<title>#1 はじめまして</title>
<description>Q&amp;A &lt;前編&gt;</description>
<link>https://example.com/episodes/1</link>
<guid isPermaLink="false">guid-1</guid>
<pubDate>Mon, 27 Oct 2025 08:00:00 GMT</pubDate>
<itunes:duration>754</itunes:duration>
<enclosure url="https://example.com/audio/1.mp3" length="456" type="audio/mpeg"/>
</item>
</channel>
</rss>
"""


@pytest.fixture
def sample_rss_xml() -> str:
    return SAMPLE_RSS


@pytest.fixture
def rss_file(tmp_path: Path) -> Path:
    """Feed download in an RSS directory."""
    rss_dir = tmp_path / "rss"
    rss_dir.mkdir(exist_ok=True)
    path = rss_dir / "20251103-0900-rss-file.xml"
    path.write_text(SAMPLE_RSS, encoding="utf-8")
    return path


@pytest.fixture
def make_episode() -> Callable[..., Episode]:
    """Factory for episodes with sensible defaults."""

    def _make(guid: str = "guid-1", title: str = "#1 はじめまして", **overrides: Any) -> Episode:
        data: dict[str, Any] = {
            "title": title,
            "description": "説明",
            "link": f"https://example.com/episodes/{guid}",
            "guid": guid,
            "date": "Mon, 27 Oct 2025 08:00:00 GMT",
            "duration": "754",
            "audio_url": f"https://example.com/audio/{guid}.mp3",
        }
        data.update(overrides)
        return Episode(**data)

    return _make


@pytest.fixture
def episode_records() -> list[dict[str, Any]]:
    """Raw episode records as they appear in an episodes file."""
    return [
        {
            "title": "#2 カナダで転職した話",
            "description": "転職の裏側を話しました。",
            "link": "https://example.com/episodes/2",
            "guid": "guid-2",
            "date": "Mon, 03 Nov 2025 08:00:00 GMT",
            "duration": "01:05:30",
            "audioUrl": "https://example.com/audio/2.mp3",
            "spotifyUrl": "",
            "youtubeUrl": "",
            "applePodcastUrl": "",
            "amazonMusicUrl": "",
            "newEpisodeIntroPostedToX": False,
        },
        {
            "title": "#1 はじめまして",
            "description": "Q&A <前編>",
            "link": "https://example.com/episodes/1",
            "guid": "guid-1",
            "date": "Mon, 27 Oct 2025 08:00:00 GMT",
            "duration": "754",
            "audioUrl": "https://example.com/audio/1.mp3",
            "spotifyUrl": "https://open.spotify.com/episode/abc123",
            "youtubeUrl": "https://www.youtube.com/watch?v=xyz",
            "applePodcastUrl": "https://podcasts.apple.com/jp/podcast/id1?i=1",
            "amazonMusicUrl": "https://music.amazon.co.jp/podcasts/show/episodes/ep1",
            "newEpisodeIntroPostedToX": True,
        },
    ]


@pytest.fixture
def episodes_file(tmp_path: Path, episode_records: list[dict[str, Any]]) -> Path:
    """An episodes file (bare array shape) inside ``tmp_path / "rss"``."""
    rss_dir = tmp_path / "rss"
    rss_dir.mkdir(exist_ok=True)
    path = rss_dir / "20251103-0900-episodes.json"
    path.write_text(json.dumps(episode_records, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def transcript_record() -> dict[str, Any]:
    return {
        "episodeGuid": "guid-2",
        "episodeTitle": "#2 カナダで転職した話",
        "transcribedAt": "2025-11-03T10:00:00.000Z",
        "duration": 3930,
        "fullText": "こんにちは  皆さん。 今日は 転職の話です。",
        "utterances": [
            {
                "speaker": "A",
                "text": "こんにちは  皆さん。",
                "start": 0,
                "end": 2500,
                "timestamp": "00:00",
                "confidence": 0.93,
            },
            {
                "speaker": "B",
                "text": " 今日は\n転職の話です。 ",
                "start": 65000,
                "end": 70000,
                "timestamp": "01:05",
            },
            {
                "speaker": "A",
                "text": "よろしくお願いします。",
                "start": 71000,
                "end": 73000,
                "timestamp": "01:11",
            },
        ],
        "highlight1": "カナダ転職のリアル。詳しくはPodcastで話しています",
        "highlight2": "英語面接の準備方法とは？",
        "highlight3": "",
    }


@pytest.fixture
def transcripts_dir(tmp_path: Path, transcript_record: dict[str, Any]) -> Path:
    directory = tmp_path / "transcripts"
    directory.mkdir()
    (directory / "guid-2.json").write_text(
        json.dumps(transcript_record, ensure_ascii=False, indent=2), encoding="utf-8"
    )
    return directory


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated config directory picked up by ConfigManager()."""
    directory = tmp_path / "config"
    monkeypatch.setenv("CAREERLOG_CONFIG_DIR", str(directory))
    return directory


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every credential and identifier variable from the environment."""
    for name in [
        "SPOTIFY_CLIENT_ID",
        "SPOTIFY_CLIENT_SECRET",
        "YOUTUBE_API_KEY",
        "X_API_KEY",
        "X_API_SECRET",
        "X_ACCESS_TOKEN",
        "X_ACCESS_TOKEN_SECRET",
        "ASSEMBLYAI_API_KEY",
        "GROQ_API_KEY",
        "SPOTIFY_SHOW_ID",
        "YOUTUBE_CHANNEL_ID",
        "APPLE_PODCAST_ID",
        "AMAZON_MUSIC_SHOW_ID",
        "AMAZON_MUSIC_REGION",
    ]:
        monkeypatch.delenv(name, raising=False)
