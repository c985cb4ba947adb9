"""Data models for podcast episodes and the channel."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from careerlog.utils.formatting import format_duration


class Platform(str, Enum):
    """Listening platforms an episode can be linked to."""

    SPOTIFY = "spotify"
    YOUTUBE = "youtube"
    APPLE = "apple"
    AMAZON = "amazon"

    @property
    def field(self) -> str:
        """Episode attribute holding this platform's URL."""
        return _PLATFORM_FIELDS[self]

    @property
    def label(self) -> str:
        return _PLATFORM_LABELS[self]


_PLATFORM_FIELDS = {
    Platform.SPOTIFY: "spotify_url",
    Platform.YOUTUBE: "youtube_url",
    Platform.APPLE: "apple_podcast_url",
    Platform.AMAZON: "amazon_music_url",
}

_PLATFORM_LABELS = {
    Platform.SPOTIFY: "Spotify",
    Platform.YOUTUBE: "YouTube",
    Platform.APPLE: "Apple Podcasts",
    Platform.AMAZON: "Amazon Music",
}


class Episode(BaseModel):
    """A single episode record as stored in ``*-episodes.json``.

    Field order matches the JSON the site consumes. Unknown keys are kept so
    a load/save cycle does not drop data written by other tools.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str = ""
    description: str = ""
    link: str = ""
    guid: str = ""
    date: str = ""  # RSS pubDate, verbatim
    duration: str = ""  # itunes:duration, verbatim
    audio_url: str = Field(default="", alias="audioUrl")
    spotify_url: str = Field(default="", alias="spotifyUrl")
    youtube_url: str = Field(default="", alias="youtubeUrl")
    apple_podcast_url: str = Field(default="", alias="applePodcastUrl")
    amazon_music_url: str = Field(default="", alias="amazonMusicUrl")
    # None: record predates the flag and is never auto-announced
    new_episode_intro_posted_to_x: bool | None = Field(
        default=None, alias="newEpisodeIntroPostedToX"
    )

    def get_url(self, platform: Platform) -> str:
        return getattr(self, platform.field)

    def set_url(self, platform: Platform, url: str) -> None:
        setattr(self, platform.field, url)

    def needs_url(self, platform: Platform) -> bool:
        """True when the platform URL is empty or missing."""
        return not self.get_url(platform)

    @property
    def display_duration(self) -> str:
        return format_duration(self.duration) if self.duration else ""

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# Fields that come straight from the feed, before any enrichment
RSS_FIELDS = {"title", "description", "link", "guid", "date", "duration", "audio_url"}


class ChannelInfo(BaseModel):
    """Podcast-level metadata from the RSS channel element."""

    title: str = ""
    description: str = ""
    link: str = ""
    language: str = ""
    image: str = ""


class PodcastFeed(BaseModel):
    """Whole-feed JSON document (channel, episodes and a timestamp)."""

    model_config = ConfigDict(populate_by_name=True)

    channel: ChannelInfo
    episodes: list[Episode] = Field(default_factory=list)
    last_updated: str = Field(alias="lastUpdated")

    def to_json_dict(self) -> dict:
        return {
            "channel": self.channel.model_dump(),
            "episodes": [
                episode.model_dump(by_alias=True, include=RSS_FIELDS)
                for episode in self.episodes
            ],
            "lastUpdated": self.last_updated,
        }
