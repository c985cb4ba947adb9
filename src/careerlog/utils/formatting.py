"""Display formatting shared by the site data and the CLI."""

from datetime import datetime
from email.utils import parsedate_to_datetime


def format_duration(duration: str) -> str:
    """Render an ``itunes:duration`` value as Japanese hours/minutes.

    Accepts ``HH:MM:SS``, ``MM:SS`` or a plain number of seconds. Anything
    else is returned unchanged.

    >>> format_duration("01:05:30")
    '1時間5分'
    >>> format_duration("754")
    '12分'
    """
    try:
        if ":" in duration:
            parts = [int(part) for part in duration.split(":")]
            if len(parts) == 3:
                total_seconds = parts[0] * 3600 + parts[1] * 60 + parts[2]
            elif len(parts) == 2:
                total_seconds = parts[0] * 60 + parts[1]
            else:
                return duration
        else:
            total_seconds = int(duration)
    except ValueError:
        return duration

    hours, remainder = divmod(total_seconds, 3600)
    minutes = remainder // 60

    if hours > 0:
        return f"{hours}時間{minutes}分"
    return f"{minutes}分"


def format_date(value: str) -> str:
    """Format an RSS ``pubDate`` (or ISO date) as ``2025年11月3日``."""
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return value
    return f"{parsed.year}年{parsed.month}月{parsed.day}日"


def format_timestamp(milliseconds: int | float) -> str:
    """Format an utterance offset as ``MM:SS``."""
    total_seconds = int(milliseconds // 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"
