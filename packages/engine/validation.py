"""
Submission validation.

This module answers the question: "Is this candidate acceptable right now?"
A candidate is accepted iff, checked in this order:
  1) it has not been used yet this round          (ALREADY_USED)
  2) it can be spelled from the root word letters (IMPOSSIBLE_LETTERS)
  3) the dictionary recognizes it                 (NOT_A_WORD)
  4) it has at least 3 letters                    (TOO_SHORT)
  5) it is not the root word itself               (SAME_AS_ROOT)

The first failing check wins, so the player only ever sees one reason.
Cheap local checks run before the dictionary lookup.

Rejections are ordinary return values, not exceptions: they happen all the
time and the player just tries again.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .constraints import is_possible
from .scoring import MIN_WORD_LENGTH, score_delta

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class ReasonCode(enum.Enum):
    ALREADY_USED = "already_used"
    IMPOSSIBLE_LETTERS = "impossible_letters"
    NOT_A_WORD = "not_a_word"
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"


@dataclass(frozen=True)
class Accepted:
    """Candidate passed every check; the caller records it on the state."""
    word: str
    score_delta: float


@dataclass(frozen=True)
class Rejected:
    """Candidate failed a check; `reason` names the first one that failed."""
    reason: ReasonCode
    word: str = ""


ValidationOutcome = Union[Accepted, Rejected]


def normalize(candidate: str) -> str:
    """Lowercase and trim surrounding whitespace."""
    return candidate.lower().strip()


# -----------------------------
# Guards
# -----------------------------

def is_original(word: str, used_words: Sequence[str]) -> bool:
    return word not in used_words


def is_real(word: str, dictionary, language: str = DEFAULT_LANGUAGE) -> bool:
    return bool(dictionary.is_recognized_word(word, language))


def has_enough_letters(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH


def is_different(word: str, root: str) -> bool:
    return word != root


# -----------------------------
# Public API
# -----------------------------

def validate(
        candidate: str,
        state,
        dictionary,
        *,
        language: str = DEFAULT_LANGUAGE,
) -> Optional[ValidationOutcome]:
    """
    Run the guard pipeline for `candidate` against the current round.

    Args:
      candidate  : raw text as typed by the player
      state      : object exposing `root_word` and `used_words`
                   (normally a GameState)
      dictionary : object exposing is_recognized_word(word, language)
      language   : dictionary language to check against

    Returns:
      - None when the candidate is blank after trimming (nothing to do)
      - Rejected(reason, word) on the first failing check
      - Accepted(word, score_delta) otherwise

    The state is never modified here; see game.core.submit.
    """
    word = normalize(candidate)
    if not word:
        return None

    root = state.root_word

    if not is_original(word, state.used_words):
        reason = ReasonCode.ALREADY_USED
    elif not is_possible(word, root):
        reason = ReasonCode.IMPOSSIBLE_LETTERS
    elif not is_real(word, dictionary, language):
        reason = ReasonCode.NOT_A_WORD
    elif not has_enough_letters(word):
        reason = ReasonCode.TOO_SHORT
    elif not is_different(word, root):
        reason = ReasonCode.SAME_AS_ROOT
    else:
        return Accepted(word, score_delta(word))

    logger.debug("rejected %r for root %r: %s", word, root, reason.name)
    return Rejected(reason, word)
