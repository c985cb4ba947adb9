"""Fuzzy episode title matching across platforms."""

from careerlog.matching.matcher import (
    Matchable,
    MatchOutcome,
    MatchTier,
    PlatformCandidate,
    find_match,
    match_title,
    normalize_title,
)

__all__ = [
    "Matchable",
    "PlatformCandidate",
    "MatchTier",
    "MatchOutcome",
    "normalize_title",
    "find_match",
    "match_title",
]
