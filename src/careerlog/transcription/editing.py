"""In-place edits applied to transcripts after transcription."""

import re

from careerlog.transcription.models import Transcript

_WHITESPACE = re.compile(r"\s+")


def cleanup_text(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def rename_speaker(transcript: Transcript, old_speaker: str, new_speaker: str) -> int:
    """Relabel every utterance by ``old_speaker``. Returns the number changed.

    Raises:
        ValueError: If ``new_speaker`` is empty or only whitespace
    """
    if not new_speaker or not new_speaker.strip():
        raise ValueError("New speaker name cannot be empty")

    count = 0
    for utterance in transcript.utterances:
        if utterance.speaker == old_speaker:
            utterance.speaker = new_speaker
            count += 1
    return count


def cleanup_transcript(transcript: Transcript) -> int:
    """Collapse whitespace in each utterance and rebuild the full text.

    Returns:
        Number of utterances processed
    """
    for utterance in transcript.utterances:
        utterance.text = cleanup_text(utterance.text)
    transcript.full_text = " ".join(utterance.text for utterance in transcript.utterances)
    return len(transcript.utterances)
