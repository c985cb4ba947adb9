"""Retention for the timestamped files that accumulate in the RSS directory."""

import logging
import re
from datetime import datetime, timedelta
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

_FILENAME_TIMESTAMP = re.compile(r"^(\d{4})(\d{2})(\d{2})-(\d{2})(\d{2})-")


class CleanupReport(BaseModel):
    """Files removed and kept by a cleanup run."""

    deleted: list[Path] = Field(default_factory=list)
    kept: list[Path] = Field(default_factory=list)


def parse_timestamp_from_filename(filename: str) -> datetime | None:
    """Parse the ``YYYYMMDD-HHMM-`` prefix of a generated file name."""
    match = _FILENAME_TIMESTAMP.match(filename)
    if not match:
        return None
    try:
        return datetime(*(int(group) for group in match.groups()))
    except ValueError:
        return None


def _timestamped(rss_dir: Path, suffix: str) -> list[tuple[Path, datetime]]:
    files = []
    for path in rss_dir.iterdir():
        if not path.name.endswith(suffix):
            continue
        stamp = parse_timestamp_from_filename(path.name)
        if stamp is not None:
            files.append((path, stamp))
    return sorted(files, key=lambda item: item[1], reverse=True)


def cleanup_rss_directory(
    rss_dir: Path, days_to_keep: int = 3, now: datetime | None = None
) -> CleanupReport:
    """Delete stale feed downloads and episode files.

    Only the newest ``*-rss-file.xml`` survives. ``*-episodes.json`` files
    are kept while their filename timestamp is within ``days_to_keep`` days.
    Files without a parsable timestamp are never touched.

    Args:
        rss_dir: Directory to clean
        days_to_keep: Age limit for episodes files
        now: Reference time (defaults to local now)

    Returns:
        CleanupReport listing deleted and kept files
    """
    report = CleanupReport()
    now = now or datetime.now()

    rss_files = _timestamped(rss_dir, "-rss-file.xml")
    if rss_files:
        newest, _ = rss_files[0]
        logger.info(f"Keeping newest RSS XML: {newest.name}")
        report.kept.append(newest)
        for path, _ in rss_files[1:]:
            logger.info(f"Deleting old RSS XML: {path.name}")
            path.unlink()
            report.deleted.append(path)
    else:
        logger.info("No RSS XML files found")

    cutoff = now - timedelta(days=days_to_keep)
    for path, stamp in _timestamped(rss_dir, "-episodes.json"):
        if stamp < cutoff:
            logger.info(f"Deleting episodes file older than {cutoff:%Y-%m-%d %H:%M}: {path.name}")
            path.unlink()
            report.deleted.append(path)
        else:
            report.kept.append(path)

    return report
