"""Episode records, RSS parsing and the episode store."""

from careerlog.episodes.channel import update_channel_info
from careerlog.episodes.generate import (
    generate_episodes_file,
    load_existing_episodes,
    merge_episodes,
)
from careerlog.episodes.models import ChannelInfo, Episode, Platform, PodcastFeed
from careerlog.episodes.retention import (
    CleanupReport,
    cleanup_rss_directory,
    parse_timestamp_from_filename,
)
from careerlog.episodes.rss import parse_channel_info, parse_feed, parse_rss_episodes
from careerlog.episodes.store import (
    EpisodeStore,
    find_latest_episodes_file,
    find_latest_rss_file,
    timestamped_filename,
)
from careerlog.episodes.updates import (
    PlatformUrls,
    apply_batch_updates,
    update_episode_urls,
)

__all__ = [
    "Episode",
    "ChannelInfo",
    "PodcastFeed",
    "Platform",
    "EpisodeStore",
    "find_latest_episodes_file",
    "find_latest_rss_file",
    "timestamped_filename",
    "parse_rss_episodes",
    "parse_channel_info",
    "parse_feed",
    "merge_episodes",
    "load_existing_episodes",
    "generate_episodes_file",
    "PlatformUrls",
    "update_episode_urls",
    "apply_batch_updates",
    "CleanupReport",
    "cleanup_rss_directory",
    "parse_timestamp_from_filename",
    "update_channel_info",
]
