"""
Game loop primitives.

- submit:       validate one candidate and, if accepted, apply it to the state.
- play_session: feed a scripted sequence of candidates through submit().

These functions are intentionally UI-agnostic so they can be reused by
the terminal app, a notebook, or tests without changes.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from packages.engine import Accepted, Rejected, ValidationOutcome, validate
from packages.engine.validation import DEFAULT_LANGUAGE
from .state import GameState

logger = logging.getLogger(__name__)

# Command that starts a new round in scripted sessions (the "Shuffle" button).
NEW_ROUND_COMMAND = ":new"


def submit(
        state: GameState,
        candidate: str,
        dictionary,
        *,
        language: str = DEFAULT_LANGUAGE,
) -> Optional[ValidationOutcome]:
    """
    Validate `candidate` for the current round and record it when accepted.

    Returns the validation outcome, or None for blank input (the state is
    left untouched in that case, and on any rejection).
    """
    outcome = validate(candidate, state, dictionary, language=language)
    if isinstance(outcome, Accepted):
        state.record_accepted_word(outcome.word, outcome.score_delta)
        logger.debug("accepted %r (+%g), score now %g",
                     outcome.word, outcome.score_delta, state.score)
    return outcome


def submission_row(state: GameState, candidate: str, outcome: Optional[ValidationOutcome]) -> Dict:
    """One flat record per submission (shape consumed by io.write_csv)."""
    if isinstance(outcome, Accepted):
        status, reason, delta = "accepted", "", outcome.score_delta
    elif isinstance(outcome, Rejected):
        status, reason, delta = "rejected", outcome.reason.name, 0.0
    else:
        status, reason, delta = "ignored", "", 0.0
    return {
        "round": state.round_number,
        "root_word": state.root_word,
        "candidate": candidate,
        "outcome": status,
        "reason": reason,
        "score_delta": delta,
        "score": state.score,
    }


def play_session(
        state: GameState,
        candidates: Iterable[str],
        dictionary,
        *,
        root_words: Sequence[str] | None = None,
        language: str = DEFAULT_LANGUAGE,
) -> Dict:
    """
    Run a scripted session.

    Args:
        state:       game state; a round is started first if none is active
        candidates:  raw submissions; NEW_ROUND_COMMAND starts a new round
        dictionary:  spell-check capability used by validate()
        root_words:  pool for starting rounds (required if a round must start)
        language:    dictionary language

    Returns:
        dict with keys:
            submissions (list of per-submission rows), accepted (int),
            rejected (int), score (float), final (state snapshot)
    """
    if not state.root_word:
        state.start_round(root_words or [])

    rows: List[Dict] = []
    for cand in candidates:
        if cand.strip() == NEW_ROUND_COMMAND:
            state.start_round(root_words or [])
            continue
        outcome = submit(state, cand, dictionary, language=language)
        rows.append(submission_row(state, cand, outcome))

    return {
        "submissions": rows,
        "accepted": sum(1 for r in rows if r["outcome"] == "accepted"),
        "rejected": sum(1 for r in rows if r["outcome"] == "rejected"),
        "score": state.score,
        "final": state.snapshot(),
    }
