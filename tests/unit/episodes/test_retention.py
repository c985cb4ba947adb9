"""Tests for RSS directory retention."""

from datetime import datetime
from pathlib import Path

from careerlog.episodes.retention import cleanup_rss_directory, parse_timestamp_from_filename


def test_parse_timestamp_from_filename() -> None:
    """Test the YYYYMMDD-HHMM prefix is parsed."""
    assert parse_timestamp_from_filename("20251101-0815-episodes.json") == datetime(
        2025, 11, 1, 8, 15
    )
    assert parse_timestamp_from_filename("channel-info.json") is None
    assert parse_timestamp_from_filename("20251399-0815-episodes.json") is None


def test_cleanup_rss_directory(tmp_path: Path) -> None:
    """Test only the newest feed survives and old episodes files are deleted."""
    names = [
        "20251101-0800-rss-file.xml",
        "20251105-0800-rss-file.xml",
        "20251101-0800-episodes.json",
        "20251104-0800-episodes.json",
        "20251105-0800-episodes.json",
        "channel-info.json",
        "latest.xml",
    ]
    for name in names:
        (tmp_path / name).write_text("x")

    report = cleanup_rss_directory(tmp_path, days_to_keep=3, now=datetime(2025, 11, 5, 9, 0))

    remaining = sorted(path.name for path in tmp_path.iterdir())
    assert remaining == [
        "20251104-0800-episodes.json",
        "20251105-0800-episodes.json",
        "20251105-0800-rss-file.xml",
        "channel-info.json",
        "latest.xml",
    ]
    assert sorted(path.name for path in report.deleted) == [
        "20251101-0800-episodes.json",
        "20251101-0800-rss-file.xml",
    ]
    assert len(report.kept) == 3


def test_cleanup_empty_directory(tmp_path: Path) -> None:
    """Test nothing happens in an empty directory."""
    report = cleanup_rss_directory(tmp_path)
    assert report.deleted == []
    assert report.kept == []
