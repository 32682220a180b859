"""Guest-name fuzzy matching for the attendance confirmation flow."""

from wedding.matching.distance import levenshtein_distance, similarity
from wedding.matching.matcher import Candidate, GuestMatch, GuestMatcher
from wedding.matching.normalizer import normalize, tokenize
from wedding.matching.scorer import MatchTier, SimilarityScorer, TierScore

__all__ = [
    "normalize",
    "tokenize",
    "levenshtein_distance",
    "similarity",
    "MatchTier",
    "TierScore",
    "SimilarityScorer",
    "Candidate",
    "GuestMatch",
    "GuestMatcher",
]
