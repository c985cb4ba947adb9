"""AI-generated highlights for episode transcripts."""

from careerlog.highlights.groq import (
    GroqHighlightGenerator,
    apply_highlights,
    create_highlights_prompt,
    has_highlights,
    parse_highlights,
    truncate_transcript,
)

__all__ = [
    "GroqHighlightGenerator",
    "apply_highlights",
    "create_highlights_prompt",
    "has_highlights",
    "parse_highlights",
    "truncate_transcript",
]
