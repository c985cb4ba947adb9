"""Transcript data models."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from careerlog.utils.formatting import format_timestamp


class Utterance(BaseModel):
    """One speaker turn. ``start``/``end`` are milliseconds from the start."""

    model_config = ConfigDict(extra="allow")

    speaker: str
    text: str
    start: int
    end: int
    timestamp: str = ""  # MM:SS of start, for display


class Transcript(BaseModel):
    """Transcript file as served from ``transcripts/<guid>.json``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    episode_guid: str = Field(alias="episodeGuid")
    episode_title: str = Field(alias="episodeTitle")
    transcribed_at: str = Field(alias="transcribedAt")
    duration: int | float = 0  # Seconds, as reported by AssemblyAI
    full_text: str = Field(default="", alias="fullText")
    utterances: list[Utterance] = Field(default_factory=list)
    highlight1: str | None = None
    highlight2: str | None = None
    highlight3: str | None = None

    @property
    def highlights(self) -> list[str]:
        return [h for h in (self.highlight1, self.highlight2, self.highlight3) if h]

    @property
    def speakers(self) -> set[str]:
        return {utterance.speaker for utterance in self.utterances}

    def get_highlight(self, number: int) -> str | None:
        if number not in (1, 2, 3):
            raise ValueError("Highlight number must be 1, 2, or 3")
        return getattr(self, f"highlight{number}")

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class AssemblyAIResult(BaseModel):
    """The parts of a completed AssemblyAI job we keep."""

    text: str = ""
    utterances: list[dict] = Field(default_factory=list)
    words: list[dict] = Field(default_factory=list)
    audio_duration: int | float = 0


def build_transcript(
    result: AssemblyAIResult,
    episode_guid: str,
    episode_title: str,
    now: datetime | None = None,
) -> Transcript:
    """Shape an AssemblyAI result into the transcript file format."""
    now = now or datetime.now(timezone.utc)
    return Transcript(
        episode_guid=episode_guid,
        episode_title=episode_title,
        transcribed_at=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        duration=result.audio_duration,
        full_text=result.text,
        utterances=[
            Utterance(
                speaker=utterance["speaker"],
                text=utterance["text"],
                start=utterance["start"],
                end=utterance["end"],
                timestamp=format_timestamp(utterance["start"]),
            )
            for utterance in result.utterances
        ],
    )
