"""Posting workflows: new-episode threads, highlights and form reminders.

Posting is not idempotent. The posted flag on an episode is only set after
X accepts the tweets, so a failure between posting and saving, or running
a workflow twice, can post the same content again.
"""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from careerlog.episodes.models import Episode
from careerlog.episodes.store import EpisodeStore
from careerlog.social.client import TweetPoster
from careerlog.social.formatters import (
    format_google_form_reminder_tweet,
    format_highlight_tweet,
    format_new_episode_main_tweet,
    format_new_episode_urls_tweet,
)
from careerlog.transcription.store import TranscriptStore
from careerlog.utils.errors import PostingError

logger = logging.getLogger(__name__)


@dataclass
class PostedThread:
    """Tweets of one workflow run, in posting order."""

    texts: list[str]
    tweet_ids: list[str] = field(default_factory=list)
    dry_run: bool = False
    episode: Episode | None = None

    @property
    def posted(self) -> bool:
        return bool(self.tweet_ids)


async def post_thread(
    texts: list[str], client: TweetPoster | None, dry_run: bool = False
) -> PostedThread:
    """Post ``texts`` as a thread, each a reply to the one before.

    With ``dry_run`` the texts are only logged.
    """
    thread = PostedThread(texts=texts, dry_run=dry_run)

    for index, text in enumerate(texts):
        logger.info(f"Tweet {index + 1}/{len(texts)} ({len(text)} chars):\n{text}")

    if dry_run:
        logger.info("Dry run: nothing posted")
        return thread

    if client is None:
        raise PostingError("No X client configured")

    reply_to: str | None = None
    for text in texts:
        reply_to = await asyncio.to_thread(client.post_tweet, text, reply_to)
        thread.tweet_ids.append(reply_to)

    return thread


def _with_urls_reply(first: str, episode: Episode) -> list[str]:
    urls_tweet = format_new_episode_urls_tweet(episode)
    return [first, urls_tweet] if urls_tweet else [first]


def _mark_intro_posted(store: EpisodeStore, guid: str) -> None:
    episodes = store.load()
    for episode in episodes:
        if episode.guid == guid:
            episode.new_episode_intro_posted_to_x = True
            store.save(episodes)
            logger.info(f"Marked {guid} as announced on X")
            return
    logger.warning(f"Episode {guid} not found, skipping posted flag update")


async def post_new_episode_intro(
    store: EpisodeStore,
    guid: str,
    hosts: str,
    client: TweetPoster | None,
    dry_run: bool = False,
) -> PostedThread:
    """Announce an episode, reply with its platform links, then flag it as posted.

    Raises:
        EpisodeNotFoundError: If ``guid`` is not in the store
        PostingError: If X rejects a tweet; the flag is left unchanged
    """
    episode = store.get_episode(guid)
    logger.info(f"Episode: {episode.title}")

    texts = _with_urls_reply(format_new_episode_main_tweet(episode, hosts), episode)
    thread = await post_thread(texts, client, dry_run=dry_run)
    thread.episode = episode

    if not dry_run:
        _mark_intro_posted(store, guid)

    return thread


def find_episode_to_announce(episodes: Iterable[Episode]) -> Episode | None:
    """First episode explicitly flagged as not yet announced.

    Records without the flag predate it and are never picked.
    """
    for episode in episodes:
        if episode.new_episode_intro_posted_to_x is False:
            return episode
    return None


async def auto_post_next_episode(
    store: EpisodeStore,
    hosts: str,
    client: TweetPoster | None,
    dry_run: bool = False,
) -> PostedThread | None:
    """Announce the next unannounced episode, if there is one."""
    episode = find_episode_to_announce(store.load())
    if episode is None:
        logger.info("No episodes need to be posted to X")
        return None

    logger.info(f"Found episode to post: {episode.title} ({episode.guid})")
    return await post_new_episode_intro(store, episode.guid, hosts, client, dry_run=dry_run)


async def post_episode_highlight(
    store: EpisodeStore,
    transcripts: TranscriptStore,
    guid: str,
    number: int,
    client: TweetPoster | None,
    dry_run: bool = False,
) -> PostedThread:
    """Post one transcript highlight with the platform links as a reply.

    Raises:
        ValueError: If ``number`` is not 1-3 or the highlight is empty
        EpisodeNotFoundError: If ``guid`` is not in the store
        TranscriptNotFoundError: If the episode has no transcript
    """
    if number not in (1, 2, 3):
        raise ValueError("Highlight number must be 1, 2, or 3")

    episode = store.get_episode(guid)
    transcript = await transcripts.load(guid)

    texts = _with_urls_reply(format_highlight_tweet(episode, transcript, number), episode)
    thread = await post_thread(texts, client, dry_run=dry_run)
    thread.episode = episode
    return thread


async def post_google_form_reminder(
    form_url: str, client: TweetPoster | None, dry_run: bool = False
) -> PostedThread:
    return await post_thread([format_google_form_reminder_tweet(form_url)], client, dry_run=dry_run)
