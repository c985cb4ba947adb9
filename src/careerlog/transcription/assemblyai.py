"""AssemblyAI transcription client.

Submits an audio URL for transcription with speaker labels, then polls the
job until it completes, fails, or runs out of attempts.
"""

import logging

import httpx
from tenacity import AsyncRetrying, RetryError, retry_if_result, stop_after_attempt, wait_fixed

from careerlog.platforms.base import http_client
from careerlog.transcription.models import AssemblyAIResult
from careerlog.utils.errors import TranscriptionError, TranscriptionTimeoutError

logger = logging.getLogger(__name__)

API_BASE = "https://api.assemblyai.com/v2"


class AssemblyAIClient:
    """Thin async wrapper over the AssemblyAI v2 REST API."""

    def __init__(
        self,
        api_key: str,
        language_code: str = "ja",
        poll_interval: float = 5.0,
        max_attempts: int = 120,
        client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.language_code = language_code
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts
        self._client = client

    @property
    def _headers(self) -> dict[str, str]:
        return {"authorization": self.api_key, "content-type": "application/json"}

    async def submit(self, client: httpx.AsyncClient, audio_url: str) -> str:
        """Start a transcription job and return its id."""
        payload = {
            "audio_url": audio_url,
            "speaker_labels": True,
            "language_code": self.language_code,
            "punctuate": True,
            "format_text": True,
        }
        try:
            response = await client.post(
                f"{API_BASE}/transcript", json=payload, headers=self._headers
            )
        except httpx.HTTPError as e:
            raise TranscriptionError(f"AssemblyAI upload failed: {e}") from e

        if not response.is_success:
            raise TranscriptionError(
                f"AssemblyAI upload failed: {response.status_code} - {response.text}"
            )

        transcript_id = response.json().get("id")
        if not transcript_id:
            raise TranscriptionError("AssemblyAI upload failed: no transcript id returned")
        return transcript_id

    async def poll_once(
        self, client: httpx.AsyncClient, transcript_id: str
    ) -> AssemblyAIResult | None:
        """Check a job once. Returns None while it is still queued or processing."""
        try:
            response = await client.get(
                f"{API_BASE}/transcript/{transcript_id}", headers=self._headers
            )
        except httpx.HTTPError as e:
            raise TranscriptionError(f"Failed to get transcription status: {e}") from e

        if not response.is_success:
            raise TranscriptionError(
                f"Failed to get transcription status: {response.status_code} - {response.text}"
            )

        data = response.json()
        status = data.get("status")

        if status == "completed":
            return AssemblyAIResult(
                text=data.get("text") or "",
                utterances=data.get("utterances") or [],
                words=data.get("words") or [],
                audio_duration=data.get("audio_duration") or 0,
            )
        if status == "error":
            raise TranscriptionError(f"Transcription failed: {data.get('error')}")

        logger.debug(f"Transcription {transcript_id} status: {status}")
        return None

    async def wait_for_completion(
        self, client: httpx.AsyncClient, transcript_id: str
    ) -> AssemblyAIResult:
        """Poll until the job finishes.

        Raises:
            TranscriptionError: If AssemblyAI reports an error
            TranscriptionTimeoutError: If ``max_attempts`` polls go unanswered
        """
        retrying = AsyncRetrying(
            retry=retry_if_result(lambda result: result is None),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_fixed(self.poll_interval),
        )

        try:
            async for attempt in retrying:
                with attempt:
                    result = await self.poll_once(client, transcript_id)
                if not attempt.retry_state.outcome.failed:
                    attempt.retry_state.set_result(result)
        except RetryError as e:
            raise TranscriptionTimeoutError("Transcription timed out") from e

        return result

    async def transcribe(self, audio_url: str) -> AssemblyAIResult:
        """Submit ``audio_url`` and wait for the finished transcript."""
        async with http_client(self._client) as client:
            transcript_id = await self.submit(client, audio_url)
            logger.info(f"Transcription job started: {transcript_id}")
            return await self.wait_for_completion(client, transcript_id)
