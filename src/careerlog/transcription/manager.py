"""Transcription manager tying the AssemblyAI client to the transcript store."""

import logging

from careerlog.episodes.models import Episode
from careerlog.transcription.assemblyai import AssemblyAIClient
from careerlog.transcription.editing import cleanup_transcript, rename_speaker
from careerlog.transcription.models import Transcript, build_transcript
from careerlog.transcription.store import TranscriptStore
from careerlog.utils.errors import TranscriptionError

logger = logging.getLogger(__name__)


class TranscriptionManager:
    """High-level operations on episode transcripts.

    Orchestrates:
    - Submitting episode audio to AssemblyAI and saving the result
    - Renaming diarized speaker labels (A, B, ...) to host names
    - Whitespace cleanup of transcribed text
    """

    def __init__(self, store: TranscriptStore, client: AssemblyAIClient | None = None):
        self.store = store
        self.client = client

    async def transcribe_episode(self, episode: Episode) -> Transcript:
        """Transcribe ``episode`` and write ``<guid>.json``, replacing any existing file.

        Raises:
            TranscriptionError: If no client is configured, the episode has no
                audio, or AssemblyAI fails
        """
        if self.client is None:
            raise TranscriptionError("No AssemblyAI client configured")
        if not episode.audio_url:
            raise TranscriptionError(f"Episode {episode.guid} has no audio URL")

        if self.store.exists(episode.guid):
            logger.warning(
                f"Transcript already exists for {episode.guid}; overwriting existing transcript"
            )

        logger.info(f"Submitting transcription job for: {episode.title}")
        result = await self.client.transcribe(episode.audio_url)

        transcript = build_transcript(result, episode.guid, episode.title)
        path = await self.store.save(transcript)

        logger.info(
            f"Transcribed {episode.guid}: {int(result.audio_duration)}s, "
            f"{len(transcript.speakers)} speakers, {len(transcript.utterances)} utterances, "
            f"{len(result.words)} words -> {path}"
        )
        return transcript

    async def rename_speaker(self, guid: str, old_speaker: str, new_speaker: str) -> int:
        """Relabel a speaker and save. Nothing is written when no utterance matches."""
        transcript = await self.store.load(guid)
        count = rename_speaker(transcript, old_speaker, new_speaker)

        if count == 0:
            logger.warning(f'No utterances found with speaker "{old_speaker}"')
            return 0

        await self.store.save(transcript)
        logger.info(f'Updated {count} utterances: "{old_speaker}" -> "{new_speaker}"')
        return count

    async def cleanup(self, guid: str) -> int:
        """Normalize whitespace in a stored transcript. Returns utterances cleaned."""
        transcript = await self.store.load(guid)
        count = cleanup_transcript(transcript)
        await self.store.save(transcript)
        logger.info(f"Cleaned {count} utterances in {guid}")
        return count
