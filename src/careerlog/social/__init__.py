"""Announcing episodes on X."""

from careerlog.social.client import TweetPoster, XClient
from careerlog.social.formatters import (
    format_google_form_reminder_tweet,
    format_highlight_tweet,
    format_new_episode_main_tweet,
    format_new_episode_urls_tweet,
)
from careerlog.social.workflows import (
    PostedThread,
    auto_post_next_episode,
    find_episode_to_announce,
    post_episode_highlight,
    post_google_form_reminder,
    post_new_episode_intro,
    post_thread,
)

__all__ = [
    "TweetPoster",
    "XClient",
    "PostedThread",
    "format_new_episode_main_tweet",
    "format_new_episode_urls_tweet",
    "format_highlight_tweet",
    "format_google_form_reminder_tweet",
    "post_thread",
    "post_new_episode_intro",
    "find_episode_to_announce",
    "auto_post_next_episode",
    "post_episode_highlight",
    "post_google_form_reminder",
]
