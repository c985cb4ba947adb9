"""Episode transcription via AssemblyAI and transcript file management."""

from careerlog.transcription.assemblyai import AssemblyAIClient
from careerlog.transcription.editing import cleanup_text, cleanup_transcript, rename_speaker
from careerlog.transcription.manager import TranscriptionManager
from careerlog.transcription.models import (
    AssemblyAIResult,
    Transcript,
    Utterance,
    build_transcript,
)
from careerlog.transcription.store import TranscriptStore, find_episodes_without_transcripts

__all__ = [
    "AssemblyAIClient",
    "AssemblyAIResult",
    "Transcript",
    "Utterance",
    "TranscriptStore",
    "TranscriptionManager",
    "build_transcript",
    "cleanup_text",
    "cleanup_transcript",
    "rename_speaker",
    "find_episodes_without_transcripts",
]
