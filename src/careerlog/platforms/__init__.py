"""Episode listings from Spotify, YouTube, Apple Podcasts and Amazon Music."""

from careerlog.episodes.models import Platform
from careerlog.platforms.amazon import AmazonMusicFetcher, extract_show_id_from_url
from careerlog.platforms.apple import (
    AppleFetcher,
    PodcastSearchResult,
    extract_podcast_id_from_url,
    search_podcasts,
)
from careerlog.platforms.base import EpisodeFetcher
from careerlog.platforms.factory import FetcherSelection, build_fetchers, find_episode_url
from careerlog.platforms.spotify import (
    SpotifyFetcher,
    get_spotify_embed_url,
    is_valid_spotify_episode_url,
)
from careerlog.platforms.youtube import YouTubeFetcher, extract_channel_id_from_url

__all__ = [
    "Platform",
    "EpisodeFetcher",
    "SpotifyFetcher",
    "YouTubeFetcher",
    "AppleFetcher",
    "AmazonMusicFetcher",
    "FetcherSelection",
    "build_fetchers",
    "find_episode_url",
    "PodcastSearchResult",
    "search_podcasts",
    "is_valid_spotify_episode_url",
    "get_spotify_embed_url",
    "extract_channel_id_from_url",
    "extract_podcast_id_from_url",
    "extract_show_id_from_url",
]
