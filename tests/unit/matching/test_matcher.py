"""Tests for cross-platform title matching."""

import pytest

from careerlog.matching import (
    MatchTier,
    PlatformCandidate,
    find_match,
    match_title,
    normalize_title,
)


def _candidates(*pairs: tuple[str, str]) -> list[PlatformCandidate]:
    return [PlatformCandidate(title=title, url=url) for title, url in pairs]


class TestNormalizeTitle:
    """Tests for normalize_title."""

    def test_collapses_whitespace_runs(self) -> None:
        """Test that runs of spaces, tabs and newlines become one space."""
        assert normalize_title("Episode  One\t\nPart") == "Episode One Part"

    def test_trims(self) -> None:
        """Test leading and trailing whitespace is removed."""
        assert normalize_title("  #1 はじめまして  ") == "#1 はじめまして"

    def test_ideographic_space_is_whitespace(self) -> None:
        """Test U+3000 is treated like any other whitespace."""
        assert normalize_title("#1　はじめまして") == "#1 はじめまして"

    def test_byte_order_mark_is_whitespace(self) -> None:
        """Test a leading U+FEFF is trimmed like whitespace."""
        assert normalize_title("\ufeff#1 はじめまして") == "#1 はじめまして"

    @pytest.mark.parametrize(
        "title", ["Episode  One", " a　　b ", "", "already normal"]
    )
    def test_idempotent(self, title: str) -> None:
        """Test normalizing twice equals normalizing once."""
        once = normalize_title(title)
        assert normalize_title(once) == once


class TestFindMatch:
    """Tests for the three-tier match."""

    def test_exact_match(self) -> None:
        """Test exact equality is found."""
        outcome = find_match(_candidates(("A", "u1"), ("B", "u2")), "B")
        assert outcome is not None
        assert outcome.url == "u2"
        assert outcome.tier is MatchTier.EXACT

    def test_exact_beats_earlier_normalized_candidate(self) -> None:
        """Test an exact match wins over an earlier candidate that only matches normalized."""
        candidates = _candidates(("Episode  One", "normalized"), ("Episode One", "exact"))
        outcome = find_match(candidates, "Episode One")
        assert outcome is not None
        assert outcome.url == "exact"
        assert outcome.tier is MatchTier.EXACT

    def test_normalized_match(self) -> None:
        """Test whitespace-only differences match at the normalized tier."""
        outcome = find_match(_candidates(("Episode One", "u1")), "Episode  One")
        assert outcome is not None
        assert outcome.url == "u1"
        assert outcome.tier is MatchTier.NORMALIZED

    def test_normalized_match_with_ideographic_space(self) -> None:
        """Test a full-width space in one title still matches."""
        outcome = find_match(_candidates(("#3　海外就職", "u1")), "#3 海外就職")
        assert outcome is not None
        assert outcome.tier is MatchTier.NORMALIZED

    def test_normalized_match_with_byte_order_mark(self) -> None:
        """Test a title carrying a leading BOM matches at the normalized tier."""
        outcome = find_match(_candidates(("\ufeff#1 はじめまして", "u1")), "#1 はじめまして")
        assert outcome is not None
        assert outcome.url == "u1"
        assert outcome.tier is MatchTier.NORMALIZED

    def test_substring_candidate_contains_target(self) -> None:
        """Test a longer platform title containing ours matches."""
        candidates = _candidates(("My Great Talk (Part 1)", "u1"))
        outcome = find_match(candidates, "My Great Talk")
        assert outcome is not None
        assert outcome.url == "u1"
        assert outcome.tier is MatchTier.SUBSTRING

    def test_substring_target_contains_candidate(self) -> None:
        """Test containment works in the other direction too."""
        candidates = _candidates(("Great Talk", "u1"))
        outcome = find_match(candidates, "My Great Talk (Part 1)")
        assert outcome is not None
        assert outcome.url == "u1"

    def test_first_candidate_wins_within_tier(self) -> None:
        """Test input order breaks ties inside a tier."""
        candidates = _candidates(("Talk Part 1", "first"), ("Talk Part 2", "second"))
        assert match_title(candidates, "Talk") == "first"

    def test_no_match(self) -> None:
        """Test unrelated titles produce no match."""
        assert find_match(_candidates(("Something else", "u1")), "My Talk") is None

    def test_empty_candidates(self) -> None:
        """Test an empty list never matches."""
        assert find_match([], "anything") is None
        assert match_title([], "anything") is None

    def test_empty_candidate_titles_ignored(self) -> None:
        """Test a blank title does not match everything as a substring."""
        candidates = _candidates(("", "blank"), ("Other", "u2"))
        assert match_title(candidates, "My Talk") is None

    def test_case_sensitive(self) -> None:
        """Test matching does not fold case."""
        assert match_title(_candidates(("my talk", "u1")), "My Talk") is None


class TestMatchTitle:
    """Tests for match_title."""

    def test_returns_url(self) -> None:
        """Test the matched candidate's URL is returned."""
        candidates = _candidates(("#1 はじめまして", "https://example.com/1"))
        assert match_title(candidates, "#1 はじめまして") == "https://example.com/1"

    def test_accepts_any_title_url_object(self) -> None:
        """Test objects with title and url attributes are accepted."""

        class Item:
            def __init__(self, title: str, url: str) -> None:
                self.title = title
                self.url = url

        assert match_title([Item("Episode One", "u1")], "Episode  One") == "u1"
