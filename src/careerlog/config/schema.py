"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class SpotifyConfig(BaseModel):
    """Spotify show to match against."""

    show_id: str = "0bj38cgbe71oCr5Q0emwvA"


class YouTubeConfig(BaseModel):
    """YouTube channel to match against."""

    channel: str = "@kaigaicareerlog"  # Handle or channel ID


class AppleConfig(BaseModel):
    """Apple Podcasts lookup settings."""

    podcast_id: str = "1818019572"
    episode_limit: int = 200


class AmazonConfig(BaseModel):
    """Amazon Music page scraping settings."""

    show_id: str = "118b5e6b-1f97-4c62-97a5-754714381b40"
    region: str = "co.jp"
    headless: bool = True
    navigation_timeout_ms: int = 30000
    selector_timeout_ms: int = 15000
    settle_delay_ms: int = 2000


class TranscriptionConfig(BaseModel):
    """AssemblyAI transcription settings."""

    language_code: str = "ja"
    poll_interval_seconds: float = 5.0
    max_poll_attempts: int = 120  # 10 minutes at the default interval


class HighlightsConfig(BaseModel):
    """Groq highlight generation settings."""

    model: str = "llama-3.3-70b-versatile"
    temperature: float = 0.9
    max_tokens: int = 1000
    max_transcript_chars: int = 15000  # Keeps the prompt under the free-tier token limit


class SocialConfig(BaseModel):
    """X posting settings."""

    google_form_url: str = "https://forms.gle/pPThnBsCKX38MzT36"


class RetentionConfig(BaseModel):
    """Cleanup policy for timestamped files in the RSS directory."""

    episode_days_to_keep: int = 3


class GlobalConfig(BaseModel):
    """Global careerlog configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"
    rss_dir: Path = Field(default=Path("public/rss"))
    transcripts_dir: Path = Field(default=Path("public/transcripts"))
    channel_info_file: Path = Field(default=Path("public/rss/channel-info.json"))

    spotify: SpotifyConfig = Field(default_factory=SpotifyConfig)
    youtube: YouTubeConfig = Field(default_factory=YouTubeConfig)
    apple: AppleConfig = Field(default_factory=AppleConfig)
    amazon: AmazonConfig = Field(default_factory=AmazonConfig)
    transcription: TranscriptionConfig = Field(default_factory=TranscriptionConfig)
    highlights: HighlightsConfig = Field(default_factory=HighlightsConfig)
    social: SocialConfig = Field(default_factory=SocialConfig)
    retention: RetentionConfig = Field(default_factory=RetentionConfig)
