"""Generate shareable episode highlights with Groq's chat completions API."""

import logging

import httpx

from careerlog.config.schema import HighlightsConfig
from careerlog.platforms.base import http_client
from careerlog.transcription.models import Transcript
from careerlog.utils.errors import HighlightError

logger = logging.getLogger(__name__)

API_URL = "https://api.groq.com/openai/v1/chat/completions"
HIGHLIGHT_COUNT = 3

PROMPT_TEMPLATE = """Generate 3 engaging highlights from this podcast episode. Each highlight should be in 140 Japanese characters maximum. These will be posted on X (Twitter) and should naturally encourage readers to listen to the full podcast.

Target audience: Japanese people who want to have a career outside of Japan.

Requirements for each highlight:
- Extract the MOST interesting, valuable, or surprising insights from the actual content
- Be truthful and authentic - DO NOT exaggerate or make false claims
- Include specific numbers, facts, or concrete examples when they exist in the transcript
- Use varied, natural Japanese openings - avoid repetitive clickbait phrases
- Make it conversational and relatable, like sharing insider knowledge with a friend
- Focus on what's genuinely useful, surprising, or thought-provoking
- Each highlight should have a different tone and angle (e.g., one factual, one emotional, one actionable)
- End each highlight with a subtle call-to-action or hint to listen to the podcast (e.g., '詳しくはPodcastで話しています')

Writing style variations to use:
- Direct quotes or paraphrases from speakers
- Questions that spark curiosity
- Contrasts or comparisons ("〜だと思ってたけど、実際は〜")
- Personal stories or experiences
- Actionable insights or lessons
- Unexpected revelations or realizations

Transcript:
{transcript}

Please provide exactly 3 distinct highlights with varied styles, one per line, without any numbering or bullet points. Each highlight should naturally encourage readers to check out the full podcast episode."""


def truncate_transcript(full_text: str, max_chars: int) -> str:
    if len(full_text) <= max_chars:
        return full_text
    logger.info(
        f"Transcript truncated from {len(full_text)} to {max_chars} characters to fit API limits"
    )
    return full_text[:max_chars] + "..."


def create_highlights_prompt(truncated_text: str) -> str:
    return PROMPT_TEMPLATE.format(transcript=truncated_text)


def parse_highlights(content: str) -> list[str]:
    """Split model output into at most three non-empty trimmed lines."""
    highlights = [line.strip() for line in content.strip().split("\n") if line.strip()]
    if len(highlights) != HIGHLIGHT_COUNT:
        logger.warning(
            f"Expected {HIGHLIGHT_COUNT} highlights but got {len(highlights)}"
        )
    return highlights[:HIGHLIGHT_COUNT]


def has_highlights(transcript: Transcript) -> bool:
    return bool(transcript.highlight1 or transcript.highlight2 or transcript.highlight3)


def apply_highlights(transcript: Transcript, highlights: list[str]) -> None:
    """Store highlights on the transcript; missing entries become ``""``."""
    padded = list(highlights) + [""] * HIGHLIGHT_COUNT
    transcript.highlight1 = padded[0]
    transcript.highlight2 = padded[1]
    transcript.highlight3 = padded[2]


class GroqHighlightGenerator:
    """Asks a Groq-hosted model for three short highlights of a transcript."""

    def __init__(
        self,
        api_key: str,
        settings: HighlightsConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.settings = settings or HighlightsConfig()
        self._client = client

    async def generate(self, full_text: str) -> list[str]:
        """Generate highlights for ``full_text``.

        Raises:
            HighlightError: On transport failure, a non-2xx response, or a
                response without message content
        """
        prompt = create_highlights_prompt(
            truncate_transcript(full_text, self.settings.max_transcript_chars)
        )
        payload = {
            "model": self.settings.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        logger.info("Calling Groq API to generate highlights")
        async with http_client(self._client) as client:
            try:
                response = await client.post(API_URL, json=payload, headers=headers)
            except httpx.HTTPError as e:
                raise HighlightError(f"Groq API request failed: {e}") from e

        if not response.is_success:
            raise HighlightError(f"Groq API error: {response.status_code} - {response.text}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise HighlightError(f"Unexpected Groq response: {e}") from e

        return parse_highlights(content or "")
