from .scoring import score_delta, max_score, MIN_WORD_LENGTH
from .constraints import is_possible, filter_candidates
from .validation import (
    ReasonCode,
    Accepted,
    Rejected,
    ValidationOutcome,
    validate,
    normalize,
    is_original,
    is_real,
    has_enough_letters,
    is_different,
)

__all__ = [
    "score_delta", "max_score", "MIN_WORD_LENGTH",
    "is_possible", "filter_candidates",
    "ReasonCode", "Accepted", "Rejected", "ValidationOutcome", "validate", "normalize",
    "is_original", "is_real", "has_enough_letters", "is_different",
]
