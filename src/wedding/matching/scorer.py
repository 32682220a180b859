"""Layered similarity scoring between a search term and a guest name."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from wedding.matching.distance import similarity
from wedding.matching.normalizer import normalize, tokenize

# Whole-name tiers
EXACT_SCORE = 100.0
PREFIX_BASE = 90.0
PREFIX_SPAN = 10.0
SUBSTRING_BASE = 70.0
SUBSTRING_SPAN = 20.0

# Per-word scores
WORD_EXACT_SCORE = 100.0
WORD_PREFIX_SCORE = 80.0
WORD_SUBSTRING_SCORE = 60.0
WORD_MATCH_THRESHOLD = 40.0  # a word counts only strictly above this

# Whole-string edit similarity is kept only at or above this
FALLBACK_MIN_SCORE = 50.0


class MatchTier(Enum):
    """Strategy that produced a score."""

    EXACT = "exact"
    PREFIX = "prefix"
    SUBSTRING = "substring"
    WORD = "word"
    FALLBACK = "fallback"
    NONE = "none"


@dataclass(frozen=True)
class TierScore:
    """Score together with the tier that produced it."""

    score: float
    """Similarity from 0.0 (no match) to 100.0 (normalized exact match)."""

    tier: MatchTier

    def __repr__(self) -> str:
        return f"TierScore({self.score:.2f}, {self.tier.value})"


def _exact(term: str, name: str) -> float | None:
    if name == term:
        return EXACT_SCORE
    return None


def _prefix(term: str, name: str) -> float | None:
    if name.startswith(term):
        return PREFIX_BASE + PREFIX_SPAN * (len(term) / len(name))
    return None


def _substring(term: str, name: str) -> float | None:
    if term in name:
        return SUBSTRING_BASE + SUBSTRING_SPAN * (len(term) / len(name))
    return None


def _word_pair_score(search_word: str, guest_word: str) -> float:
    if guest_word == search_word:
        return WORD_EXACT_SCORE
    if guest_word.startswith(search_word):
        return WORD_PREFIX_SCORE
    if search_word in guest_word:
        return WORD_SUBSTRING_SCORE
    return similarity(search_word, guest_word)


def _word_level(term: str, name: str) -> float | None:
    """
    Match word by word, ignoring order.

    Each search word takes its best score against the guest's words and
    counts only above WORD_MATCH_THRESHOLD. The result is the average over
    all search words multiplied by the share of words that counted, so an
    unmatched word is penalized twice.
    """
    search_words = tokenize(term)
    guest_words = tokenize(name)
    if not search_words or not guest_words:
        return None

    matched_words = 0
    total_score = 0.0

    for search_word in search_words:
        best = max(_word_pair_score(search_word, guest_word) for guest_word in guest_words)
        if best > WORD_MATCH_THRESHOLD:
            matched_words += 1
            total_score += best

    if matched_words == 0:
        return None

    average = total_score / len(search_words)
    coverage = matched_words / len(search_words)
    return average * coverage


def _fallback(term: str, name: str) -> float | None:
    score = similarity(term, name)
    if score >= FALLBACK_MIN_SCORE:
        return score
    return None


Strategy = Callable[[str, str], float | None]

# Evaluated in order; the first strategy returning a score decides.
STRATEGIES: tuple[tuple[MatchTier, Strategy], ...] = (
    (MatchTier.EXACT, _exact),
    (MatchTier.PREFIX, _prefix),
    (MatchTier.SUBSTRING, _substring),
    (MatchTier.WORD, _word_level),
    (MatchTier.FALLBACK, _fallback),
)


class SimilarityScorer:
    """
    Scores how well a free-text search term matches a guest name.

    Both inputs are normalized (case, accents, surrounding whitespace)
    before the tiers run. Stateless; one instance can be shared freely.
    """

    def __init__(
        self,
        strategies: tuple[tuple[MatchTier, Strategy], ...] = STRATEGIES,
    ) -> None:
        """
        Initialize the scorer.

        Args:
            strategies: Ordered (tier, strategy) pairs to evaluate
        """
        self._strategies = strategies

    def evaluate(self, search_term: str, guest_name: str) -> TierScore:
        """
        Score a guest name and report which tier decided.

        Args:
            search_term: Text typed by the guest
            guest_name: Guest name as stored by the administrators

        Returns:
            TierScore with a score in [0, 100]
        """
        term = normalize(search_term)
        name = normalize(guest_name)

        for tier, strategy in self._strategies:
            score = strategy(term, name)
            if score is not None:
                return TierScore(score=score, tier=tier)

        return TierScore(score=0.0, tier=MatchTier.NONE)

    def score(self, search_term: str, guest_name: str) -> float:
        """Score a guest name from 0 (no match) to 100 (exact match)."""
        return self.evaluate(search_term, guest_name).score
