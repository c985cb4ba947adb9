"""Turn a fresh RSS download into the next episodes file.

Platform URLs and the posted flag only exist in our store, so they are
carried over from the previous episodes file by GUID.
"""

import logging
from pathlib import Path

from careerlog.episodes.models import Episode, Platform
from careerlog.episodes.rss import parse_rss_episodes
from careerlog.episodes.store import EpisodeStore, dump_json, find_latest_episodes_file
from careerlog.utils.atomic import write_file_atomic
from careerlog.utils.errors import EpisodeStoreError, StoreNotFoundError

logger = logging.getLogger(__name__)


def load_existing_episodes(rss_dir: Path) -> dict[str, Episode]:
    """Load the latest episodes file keyed by GUID.

    A missing or unreadable file yields an empty mapping; generation then
    starts from scratch.
    """
    try:
        latest = find_latest_episodes_file(rss_dir)
    except StoreNotFoundError:
        logger.info("No existing episodes files found, creating new file")
        return {}

    try:
        episodes = EpisodeStore(latest).load()
    except EpisodeStoreError as e:
        logger.warning(f"Could not load existing episodes file: {e}")
        return {}

    logger.info(f"Loaded {len(episodes)} existing episodes from {latest.name}")
    return {episode.guid: episode for episode in episodes}


def merge_episodes(
    rss_episodes: list[Episode], existing: dict[str, Episode]
) -> list[Episode]:
    """Combine feed data with stored metadata, keeping feed order.

    Feed fields always win. Known GUIDs keep their platform URLs and posted
    flag; new GUIDs start with empty URLs and an unposted flag.
    """
    merged = []

    for rss_episode in rss_episodes:
        episode = rss_episode.model_copy()
        previous = existing.get(episode.guid)

        if previous is not None:
            for platform in Platform:
                episode.set_url(platform, previous.get_url(platform))
            episode.new_episode_intro_posted_to_x = previous.new_episode_intro_posted_to_x
        else:
            for platform in Platform:
                episode.set_url(platform, "")
            episode.new_episode_intro_posted_to_x = False

        merged.append(episode)

    return merged


def generate_episodes_file(xml_path: Path, output_path: Path) -> list[Episode]:
    """Parse ``xml_path`` and write the merged episode list to ``output_path``.

    Existing metadata is read from the latest episodes file in the output
    directory.

    Returns:
        Episodes that were not present before
    """
    xml_text = xml_path.read_text(encoding="utf-8")
    rss_episodes = parse_rss_episodes(xml_text)
    logger.info(f"Found {len(rss_episodes)} episodes in RSS feed")

    existing = load_existing_episodes(output_path.parent)
    episodes = merge_episodes(rss_episodes, existing)

    write_file_atomic(
        output_path, dump_json([episode.to_json_dict() for episode in episodes])
    )

    new_episodes = [episode for episode in episodes if episode.guid not in existing]
    for episode in new_episodes:
        logger.info(f"New episode: [{episode.guid}] {episode.title}")

    return new_episodes
