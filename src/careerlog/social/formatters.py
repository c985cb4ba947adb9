"""Tweet text for episode announcements, highlights and reminders."""

from careerlog.episodes.models import Episode
from careerlog.transcription.models import Transcript

NEW_EPISODE_HASHTAGS = "#海外 #海外就職 #キャリア"
HIGHLIGHT_HASHTAGS = "#海外キャリアログ #ポッドキャスト"
FORM_REMINDER_HASHTAGS = "#海外キャリアログ #ポッドキャスト #お便り募集"


def format_new_episode_main_tweet(episode: Episode, hosts: str) -> str:
    lines = [
        "🎧Podcast新エピソード公開",
        "",
        episode.title,
        "",
        "Host",
        hosts,
        "",
        NEW_EPISODE_HASHTAGS,
    ]
    return "\n".join(lines).strip()


def format_new_episode_urls_tweet(episode: Episode) -> str | None:
    """Reply listing the episode's platform links, or None if it has none."""
    lines: list[str] = []

    for label, url in (
        ("Apple", episode.apple_podcast_url),
        ("Spotify", episode.spotify_url),
        ("Youtube", episode.youtube_url),
        ("Amazon Music", episode.amazon_music_url),
    ):
        if url:
            lines.extend([label, url, ""])

    text = "\n".join(lines).strip()
    return text or None


def format_highlight_tweet(episode: Episode, transcript: Transcript, number: int) -> str:
    """Tweet quoting highlight ``number`` (1-3) of the episode's transcript.

    Raises:
        ValueError: If ``number`` is out of range or that highlight is empty
    """
    highlight = transcript.get_highlight(number)
    if not highlight:
        raise ValueError(f"Highlight {number} not found for episode {episode.guid}")

    lines = [
        f"💡 {highlight}",
        "",
        f"🎙️ {episode.title}",
        "",
        HIGHLIGHT_HASHTAGS,
    ]
    return "\n".join(lines)


def format_google_form_reminder_tweet(form_url: str) -> str:
    lines = [
        "📮 お便り募集中！",
        "",
        "海外キャリアログへのお便りを募集しています！",
        "",
        "番組の感想や質問、海外キャリアについて聞いてみたいことなど、お気軽にお送りください🙌",
        "",
        f"📝 {form_url}",
        "",
        FORM_REMINDER_HASHTAGS,
    ]
    return "\n".join(lines)
