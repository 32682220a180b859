"""Best-match selection of a guest among all invites."""

from dataclasses import dataclass
from typing import Any, Iterable

from wedding.matching.scorer import MatchTier, SimilarityScorer

# Minimum score for a guest to be considered a match at all
MIN_MATCH_SCORE = 40.0


@dataclass(frozen=True)
class Candidate:
    """A guest that can be matched, with handles back to its records."""

    guest_name: str
    """Free-text name entered by an administrator."""

    guest_ref: Any
    """Opaque handle to the guest record."""

    invite_ref: Any
    """Opaque handle to the invite the guest belongs to."""


@dataclass(frozen=True)
class GuestMatch:
    """A scored candidate that cleared the acceptance threshold."""

    candidate: Candidate
    score: float
    tier: MatchTier

    total_matches: int = 1
    """Number of candidates that cleared the threshold in the same search."""

    @property
    def invite(self) -> Any:
        return self.candidate.invite_ref

    @property
    def guest(self) -> Any:
        return self.candidate.guest_ref

    @property
    def guest_name(self) -> str:
        return self.candidate.guest_name

    def __repr__(self) -> str:
        return f"GuestMatch({self.guest_name!r}, score={self.score:.2f}, {self.tier.value})"


class GuestMatcher:
    """
    Finds the guest whose name best matches a search term.

    Every candidate is scored with SimilarityScorer, candidates below
    min_score are dropped and the rest are ranked by score, then by the
    shorter guest name. Candidates with equal score and name length keep
    their input order, so the same snapshot always yields the same winner.
    """

    def __init__(
        self,
        scorer: SimilarityScorer | None = None,
        min_score: float = MIN_MATCH_SCORE,
    ) -> None:
        """
        Initialize the matcher.

        Args:
            scorer: Similarity scorer instance
            min_score: Minimum score (0-100) for a candidate to match
        """
        self._scorer = scorer or SimilarityScorer()
        self.min_score = min_score

    @property
    def min_score(self) -> float:
        """Get the acceptance threshold."""
        return self._min_score

    @min_score.setter
    def min_score(self, value: float) -> None:
        """Set the acceptance threshold."""
        if not 0.0 <= value <= 100.0:
            raise ValueError("Minimum score must be between 0 and 100")
        self._min_score = value

    def find_all_matches(
        self,
        search_term: str,
        candidates: Iterable[Candidate],
        max_results: int | None = None,
    ) -> list[GuestMatch]:
        """
        Rank every candidate that clears the threshold.

        Args:
            search_term: Text typed by the guest
            candidates: Snapshot of all guests of all invites
            max_results: Maximum number of results to return

        Returns:
            Matches sorted best first; empty for a blank search term
        """
        if not search_term.strip():
            return []

        scored: list[tuple[Candidate, float, MatchTier]] = []
        for candidate in candidates:
            if not candidate.guest_name.strip():
                continue

            result = self._scorer.evaluate(search_term, candidate.guest_name)
            if result.score >= self._min_score:
                scored.append((candidate, result.score, result.tier))

        scored.sort(key=lambda item: (-item[1], len(item[0].guest_name)))

        matches = [
            GuestMatch(candidate=candidate, score=score, tier=tier, total_matches=len(scored))
            for candidate, score, tier in scored
        ]

        if max_results:
            matches = matches[:max_results]

        return matches

    def find_best_match(
        self,
        search_term: str,
        candidates: Iterable[Candidate],
    ) -> GuestMatch | None:
        """
        Find the single best matching guest.

        Args:
            search_term: Text typed by the guest
            candidates: Snapshot of all guests of all invites

        Returns:
            Best match, or None when no candidate clears the threshold
        """
        matches = self.find_all_matches(search_term, candidates)
        return matches[0] if matches else None
