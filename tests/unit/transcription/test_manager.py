"""Tests for TranscriptionManager."""

import json
import logging
from pathlib import Path

import pytest

from careerlog.transcription.manager import TranscriptionManager
from careerlog.transcription.models import AssemblyAIResult
from careerlog.transcription.store import TranscriptStore
from careerlog.utils.errors import TranscriptionError, TranscriptNotFoundError


class FakeAssemblyAI:
    """Stands in for AssemblyAIClient."""

    def __init__(self) -> None:
        self.audio_urls: list[str] = []

    async def transcribe(self, audio_url: str) -> AssemblyAIResult:
        self.audio_urls.append(audio_url)
        return AssemblyAIResult(
            text="こんにちは",
            audio_duration=754,
            utterances=[{"speaker": "A", "text": "こんにちは", "start": 0, "end": 1000}],
        )


class TestTranscribeEpisode:
    """Tests for transcribe_episode."""

    @pytest.mark.asyncio
    async def test_writes_transcript(self, tmp_path: Path, make_episode) -> None:
        """Test the episode audio is transcribed and saved."""
        client = FakeAssemblyAI()
        manager = TranscriptionManager(TranscriptStore(tmp_path), client)  # type: ignore[arg-type]

        transcript = await manager.transcribe_episode(make_episode(guid="guid-1"))

        assert client.audio_urls == ["https://example.com/audio/guid-1.mp3"]
        assert transcript.duration == 754
        saved = json.loads((tmp_path / "guid-1.json").read_text(encoding="utf-8"))
        assert saved["utterances"][0]["timestamp"] == "00:00"

    @pytest.mark.asyncio
    async def test_overwrite_warns(
        self, transcripts_dir: Path, make_episode, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test an existing transcript is replaced with a warning."""
        manager = TranscriptionManager(TranscriptStore(transcripts_dir), FakeAssemblyAI())  # type: ignore[arg-type]

        with caplog.at_level(logging.WARNING):
            await manager.transcribe_episode(make_episode(guid="guid-2"))

        assert "overwriting existing transcript" in caplog.text
        saved = json.loads((transcripts_dir / "guid-2.json").read_text(encoding="utf-8"))
        assert saved["fullText"] == "こんにちは"

    @pytest.mark.asyncio
    async def test_no_audio(self, tmp_path: Path, make_episode) -> None:
        """Test an episode without audio cannot be transcribed."""
        manager = TranscriptionManager(TranscriptStore(tmp_path), FakeAssemblyAI())  # type: ignore[arg-type]

        with pytest.raises(TranscriptionError, match="has no audio URL"):
            await manager.transcribe_episode(make_episode(guid="g", audio_url=""))

    @pytest.mark.asyncio
    async def test_no_client(self, tmp_path: Path, make_episode) -> None:
        """Test a manager without a client refuses to transcribe."""
        with pytest.raises(TranscriptionError, match="No AssemblyAI client"):
            await TranscriptionManager(TranscriptStore(tmp_path)).transcribe_episode(make_episode())


class TestEditing:
    """Tests for rename_speaker and cleanup."""

    @pytest.mark.asyncio
    async def test_rename_saves(self, transcripts_dir: Path) -> None:
        """Test renamed speakers are persisted."""
        manager = TranscriptionManager(TranscriptStore(transcripts_dir))

        assert await manager.rename_speaker("guid-2", "B", "Senna") == 1

        saved = json.loads((transcripts_dir / "guid-2.json").read_text(encoding="utf-8"))
        assert saved["utterances"][1]["speaker"] == "Senna"

    @pytest.mark.asyncio
    async def test_rename_no_match_does_not_write(self, transcripts_dir: Path) -> None:
        """Test the file is untouched when nothing matched."""
        path = transcripts_dir / "guid-2.json"
        before = path.read_bytes()

        assert await TranscriptionManager(TranscriptStore(transcripts_dir)).rename_speaker(
            "guid-2", "Z", "Ryo"
        ) == 0
        assert path.read_bytes() == before

    @pytest.mark.asyncio
    async def test_cleanup(self, transcripts_dir: Path) -> None:
        """Test cleanup rewrites the stored transcript."""
        count = await TranscriptionManager(TranscriptStore(transcripts_dir)).cleanup("guid-2")

        saved = json.loads((transcripts_dir / "guid-2.json").read_text(encoding="utf-8"))
        assert count == 3
        assert saved["fullText"].startswith("こんにちは 皆さん。")

    @pytest.mark.asyncio
    async def test_missing_transcript(self, tmp_path: Path) -> None:
        """Test editing a missing transcript raises."""
        with pytest.raises(TranscriptNotFoundError):
            await TranscriptionManager(TranscriptStore(tmp_path)).cleanup("nope")
