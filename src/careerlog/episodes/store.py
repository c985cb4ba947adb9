"""Episode store: the timestamped ``*-episodes.json`` files under the RSS dir."""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from careerlog.episodes.models import Episode
from careerlog.utils.atomic import write_file_atomic
from careerlog.utils.errors import (
    EpisodeNotFoundError,
    EpisodeStoreError,
    StoreNotFoundError,
)

logger = logging.getLogger(__name__)

EPISODES_FILE_PATTERN = re.compile(r"^\d{8}-\d{4}-episodes\.json$")
RSS_FILE_PATTERN = re.compile(r"^\d{8}-\d{4}-rss-file\.xml$")


def dump_json(data: Any) -> str:
    """Serialize the way the site's JSON files are written (2-space, UTF-8)."""
    return json.dumps(data, ensure_ascii=False, indent=2)


def timestamped_filename(suffix: str, now: datetime | None = None) -> str:
    """Build ``YYYYMMDD-HHMM-<suffix>``, e.g. ``20251101-0815-episodes.json``."""
    now = now or datetime.now()
    return f"{now:%Y%m%d-%H%M}-{suffix}"


def find_latest_episodes_file(rss_dir: Path) -> Path:
    """Return the newest timestamped episodes file in ``rss_dir``.

    Raises:
        StoreNotFoundError: If the directory is missing or holds no episodes files
    """
    if not rss_dir.is_dir():
        raise StoreNotFoundError(f"RSS directory not found: {rss_dir}")

    candidates = sorted(
        (p.name for p in rss_dir.iterdir() if EPISODES_FILE_PATTERN.match(p.name)),
        reverse=True,
    )
    if not candidates:
        raise StoreNotFoundError(f"No episodes.json files found in {rss_dir}")

    return rss_dir / candidates[0]


def find_latest_rss_file(rss_dir: Path) -> Path:
    """Return ``latest.xml`` if present, else the newest timestamped feed file.

    Raises:
        StoreNotFoundError: If no feed file exists
    """
    latest = rss_dir / "latest.xml"
    if latest.exists():
        return latest

    if rss_dir.is_dir():
        candidates = sorted(
            (p.name for p in rss_dir.iterdir() if RSS_FILE_PATTERN.match(p.name)),
            reverse=True,
        )
        if candidates:
            return rss_dir / candidates[0]

    raise StoreNotFoundError(f"No RSS feed files found in {rss_dir}")


class EpisodeStore:
    """Load and save one episodes JSON file.

    Two on-disk shapes exist: a bare array of episodes (current) and an
    object with ``channel``, ``episodes`` and ``lastUpdated`` (legacy). The
    store remembers which one it loaded and writes the same shape back.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._document: dict[str, Any] | None = None

    @classmethod
    def latest(cls, rss_dir: Path) -> "EpisodeStore":
        return cls(find_latest_episodes_file(rss_dir))

    def load(self) -> list[Episode]:
        """Read all episodes.

        Raises:
            StoreNotFoundError: If the file does not exist
            EpisodeStoreError: If the file is not a valid episode store
        """
        if not self.path.exists():
            raise StoreNotFoundError(f"Episodes file not found: {self.path}")

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise EpisodeStoreError(f"Invalid JSON in {self.path}: {e}") from e

        if isinstance(data, list):
            self._document = None
            records = data
        elif isinstance(data, dict):
            self._document = data
            records = data.get("episodes") or []
        else:
            raise EpisodeStoreError(f"Unexpected episodes format in {self.path}")

        try:
            return [Episode.model_validate(record) for record in records]
        except ValidationError as e:
            raise EpisodeStoreError(f"Invalid episode record in {self.path}: {e}") from e

    def save(self, episodes: list[Episode]) -> None:
        """Write all episodes atomically, preserving the loaded shape."""
        records = [episode.to_json_dict() for episode in episodes]

        if self._document is not None:
            document = dict(self._document)
            document["episodes"] = records
            document["lastUpdated"] = (
                datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
            )
            payload: Any = document
        else:
            payload = records

        write_file_atomic(self.path, dump_json(payload))
        logger.debug(f"Saved {len(records)} episodes to {self.path}")

    def get_episode(self, guid: str) -> Episode:
        """Return the episode with ``guid``.

        Raises:
            EpisodeNotFoundError: If no episode has that GUID
        """
        for episode in self.load():
            if episode.guid == guid:
                return episode
        raise EpisodeNotFoundError(guid)
