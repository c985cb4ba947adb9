"""Cross-platform episode title matching.

Each platform re-ingests our feed and hands back titles that are nearly
identical to ours, usually differing only in whitespace. Matching is a
strict three-tier fallback with no scoring:

1. exact string equality
2. equality after whitespace normalization
3. substring containment in either direction

Within a tier, the first candidate in input order wins.
"""

import logging
import re
from enum import Enum
from typing import Protocol, Sequence, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

# str patterns are Unicode-aware: \s also covers U+3000 (ideographic space).
# U+FEFF (BOM) is not in \s and is added explicitly.
_WHITESPACE = re.compile(r"[\s\ufeff]+")


class Matchable(Protocol):
    """Anything with a title and a URL can be matched."""

    @property
    def title(self) -> str: ...

    @property
    def url(self) -> str: ...


M = TypeVar("M", bound=Matchable)


class PlatformCandidate(BaseModel):
    """An episode as listed by a platform."""

    title: str
    url: str


class MatchTier(str, Enum):
    EXACT = "exact"
    NORMALIZED = "normalized"
    SUBSTRING = "substring"


class MatchOutcome(BaseModel):
    """Which candidate matched, and how."""

    title: str
    url: str
    tier: MatchTier


def normalize_title(title: str) -> str:
    """Collapse every whitespace run to one ASCII space and trim."""
    return _WHITESPACE.sub(" ", title).strip()


def find_match(candidates: Sequence[M], target: str) -> MatchOutcome | None:
    """Find the candidate for ``target``, recording the tier that matched.

    Candidates without a title are ignored. Comparison is case-sensitive.
    """
    titled = [candidate for candidate in candidates if candidate.title]

    for candidate in titled:
        if candidate.title == target:
            return MatchOutcome(title=candidate.title, url=candidate.url, tier=MatchTier.EXACT)

    normalized_target = normalize_title(target)
    for candidate in titled:
        if normalize_title(candidate.title) == normalized_target:
            return MatchOutcome(
                title=candidate.title, url=candidate.url, tier=MatchTier.NORMALIZED
            )

    for candidate in titled:
        if target in candidate.title or candidate.title in target:
            return MatchOutcome(
                title=candidate.title, url=candidate.url, tier=MatchTier.SUBSTRING
            )

    return None


def match_title(candidates: Sequence[Matchable], target: str) -> str | None:
    """Return the URL of the candidate matching ``target``, or None."""
    outcome = find_match(candidates, target)
    if outcome is None:
        logger.debug(f"No match for {target!r} among {len(candidates)} candidates")
        return None

    if outcome.tier is not MatchTier.EXACT:
        logger.debug(f"{outcome.tier.value} match: {target!r} -> {outcome.title!r}")
    return outcome.url
