"""Regex-based RSS parsing.

The hosting provider's feed is small and regular; pulling a handful of tags
out with regular expressions keeps descriptions exactly as the site shows
them (tags stripped, guest credits removed).
"""

import re
from datetime import datetime, timezone

from careerlog.episodes.models import ChannelInfo, Episode, PodcastFeed

GUEST_MARKER = "ゲスト："

_CDATA = re.compile(r"<!\[CDATA\[([\s\S]*?)\]\]>")
_TAG = re.compile(r"<[^>]+>")
_ENTITIES = [
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#39;", "'"),
]

_ITEM_PATTERNS = {
    "title": re.compile(r"<title>(.*?)</title>", re.DOTALL),
    "description": re.compile(r"<description>(.*?)</description>", re.DOTALL),
    "link": re.compile(r"<link>(.*?)</link>", re.DOTALL),
    "guid": re.compile(r"<guid[^>]*>(.*?)</guid>", re.DOTALL),
    "date": re.compile(r"<pubDate>(.*?)</pubDate>", re.DOTALL),
    "duration": re.compile(r"<itunes:duration>(.*?)</itunes:duration>", re.DOTALL),
}

# Channel-level fields are single-line in the feed; the first match is the channel's own
_CHANNEL_PATTERNS = {
    "title": re.compile(r"<title>(.*?)</title>"),
    "description": re.compile(r"<description>(.*?)</description>"),
    "link": re.compile(r"<link>(.*?)</link>"),
    "language": re.compile(r"<language>(.*?)</language>"),
}

_ENCLOSURE = re.compile(r'<enclosure\s+url="([^"]+)"')
_ITUNES_IMAGE = re.compile(r'<itunes:image\s+href="([^"]+)"')


def extract_text(text: str | None) -> str:
    """Unwrap CDATA and trim."""
    if not text:
        return ""

    match = _CDATA.search(text)
    if match:
        return match.group(1).strip()

    return text.strip()


def extract_with_regex(text: str, pattern: re.Pattern[str]) -> str:
    """Return the cleaned first group of ``pattern`` in ``text``.

    Cleaning unwraps CDATA, strips HTML tags, decodes the basic entities and
    drops everything from the guest credit marker onwards.
    """
    match = pattern.search(text)
    if not match:
        return ""

    content = extract_text(match.group(1) or "")
    content = _TAG.sub("", content)

    for entity, char in _ENTITIES:
        content = content.replace(entity, char)

    guest_index = content.find(GUEST_MARKER)
    if guest_index != -1:
        content = content[:guest_index].strip()

    return content


def parse_rss_episodes(xml_text: str) -> list[Episode]:
    """Parse every ``<item>`` into an Episode with empty platform URLs."""
    episodes = []

    for chunk in xml_text.split("<item>")[1:]:
        item = chunk.split("</item>")[0]

        fields = {
            name: extract_with_regex(item, pattern)
            for name, pattern in _ITEM_PATTERNS.items()
        }
        enclosure = _ENCLOSURE.search(item)
        fields["audio_url"] = enclosure.group(1) if enclosure else ""

        episodes.append(Episode(**fields))

    return episodes


def parse_channel_info(xml_text: str) -> ChannelInfo:
    fields = {
        name: extract_with_regex(xml_text, pattern)
        for name, pattern in _CHANNEL_PATTERNS.items()
    }
    image = _ITUNES_IMAGE.search(xml_text)
    fields["image"] = image.group(1) if image else ""
    return ChannelInfo(**fields)


def parse_feed(xml_text: str, now: datetime | None = None) -> PodcastFeed:
    """Parse the whole feed into the channel + episodes document."""
    now = now or datetime.now(timezone.utc)
    return PodcastFeed(
        channel=parse_channel_info(xml_text),
        episodes=parse_rss_episodes(xml_text),
        last_updated=now.isoformat().replace("+00:00", "Z"),
    )
