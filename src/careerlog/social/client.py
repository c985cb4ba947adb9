"""Posting to X through tweepy's API v2 client."""

import logging
from typing import Protocol

import tweepy

from careerlog.config.credentials import XCredentials
from careerlog.utils.errors import PostingError

logger = logging.getLogger(__name__)


class TweetPoster(Protocol):
    def post_tweet(self, text: str, in_reply_to: str | None = None) -> str: ...


class XClient:
    """Posts tweets as the account the OAuth 1.0a user tokens belong to."""

    def __init__(self, credentials: XCredentials, client: tweepy.Client | None = None):
        self._client = client or tweepy.Client(
            consumer_key=credentials.api_key,
            consumer_secret=credentials.api_secret,
            access_token=credentials.access_token,
            access_token_secret=credentials.access_token_secret,
        )

    def post_tweet(self, text: str, in_reply_to: str | None = None) -> str:
        """Post ``text``, optionally as a reply. Returns the new tweet id.

        Raises:
            PostingError: If X rejects the request or returns no tweet id
        """
        try:
            response = self._client.create_tweet(
                text=text, in_reply_to_tweet_id=in_reply_to, user_auth=True
            )
        except tweepy.HTTPException as e:
            status_code = e.response.status_code if e.response is not None else None
            raise PostingError(f"X API error: {status_code} - {e}", status_code) from e
        except tweepy.TweepyException as e:
            raise PostingError(f"X API error: {e}") from e

        data = getattr(response, "data", None) or {}
        tweet_id = data.get("id")
        if not tweet_id:
            raise PostingError("X API error: response did not include a tweet id")

        logger.info(f"Posted tweet {tweet_id}")
        return str(tweet_id)
