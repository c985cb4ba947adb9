"""Transcript files on disk, one ``<guid>.json`` per episode."""

import asyncio
import json
import logging
from pathlib import Path

import aiofiles
from pydantic import ValidationError

from careerlog.episodes.models import Episode
from careerlog.episodes.store import dump_json
from careerlog.transcription.models import Transcript
from careerlog.utils.errors import TranscriptionError, TranscriptNotFoundError

logger = logging.getLogger(__name__)


class TranscriptStore:
    """Reads and writes transcript JSON files under one directory."""

    def __init__(self, transcripts_dir: Path):
        self.transcripts_dir = transcripts_dir

    def path_for(self, guid: str) -> Path:
        return self.transcripts_dir / f"{guid}.json"

    def exists(self, guid: str) -> bool:
        return self.path_for(guid).exists()

    async def load(self, guid: str) -> Transcript:
        """Load the transcript for ``guid``.

        Raises:
            TranscriptNotFoundError: If no transcript file exists
            TranscriptionError: If the file is not a valid transcript
        """
        path = self.path_for(guid)
        if not path.exists():
            raise TranscriptNotFoundError(f"Transcript not found: {path}")

        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            content = await f.read()

        try:
            return Transcript.model_validate(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as e:
            raise TranscriptionError(f"Invalid transcript file {path}: {e}") from e

    async def save(self, transcript: Transcript) -> Path:
        """Write a transcript atomically (temp file, then rename)."""
        path = self.path_for(transcript.episode_guid)
        temp_path = path.with_suffix(".tmp")

        await asyncio.to_thread(self.transcripts_dir.mkdir, parents=True, exist_ok=True)

        try:
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(dump_json(transcript.to_json_dict()))
            await asyncio.to_thread(temp_path.replace, path)
        except OSError as e:
            if temp_path.exists():
                await asyncio.to_thread(temp_path.unlink)
            raise TranscriptionError(f"Failed to save transcript: {e}") from e

        return path


def find_episodes_without_transcripts(
    episodes: list[Episode], store: TranscriptStore
) -> list[dict[str, str]]:
    """``{guid, title}`` for every episode with no transcript file yet."""
    return [
        {"guid": episode.guid, "title": episode.title}
        for episode in episodes
        if not store.exists(episode.guid)
    ]
