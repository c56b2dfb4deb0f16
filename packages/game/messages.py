"""
Player-facing text for rejection reasons and the score line.
"""

from __future__ import annotations

from typing import Dict, Tuple

from packages.engine.validation import ReasonCode

# reason -> (title, message)
REASON_MESSAGES: Dict[ReasonCode, Tuple[str, str]] = {
    ReasonCode.ALREADY_USED: ("Word already used", "Be more original!"),
    ReasonCode.IMPOSSIBLE_LETTERS: ("Word not possible", "Use just the letters from the original word!"),
    ReasonCode.NOT_A_WORD: ("Not a real word", "Use just words that exist in the dictionary!"),
    ReasonCode.TOO_SHORT: ("Too easy", "Use words with 3 letters or more!"),
    ReasonCode.SAME_AS_ROOT: ("Too easy", "You can't use the same word!"),
}


def describe(reason: ReasonCode) -> Tuple[str, str]:
    """(title, message) pair for a rejection reason."""
    return REASON_MESSAGES[reason]


def format_score(score: float) -> str:
    """'Score: 3', 'Score: 0.5' (shortest %g form, no trailing .0)."""
    return f"Score: {score:g}"
