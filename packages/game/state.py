"""
Per-process game state.

Holds the current root word, the words accepted this round (newest first)
and the running score. Only two things change it:
  - start_round():          draw a new root word, clear the used words
  - record_accepted_word(): push an already-validated word, add its points

The score is NOT reset between rounds; it starts at 0.0 when the state is
created and only ever grows.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Sequence

from packages.datasets.io import WordListError

logger = logging.getLogger(__name__)


class GameState:
    def __init__(self, *, seed: int | None = None):
        self.root_word: str = ""
        self.used_words: List[str] = []
        self.score: float = 0.0
        self.round_number: int = 0
        self.rng = random.Random(seed)

    def start_round(self, candidate_root_words: Sequence[str]) -> str:
        """
        Pick a root word uniformly at random and start a fresh round.

        Raises WordListError if there is nothing to pick from.
        """
        if not candidate_root_words:
            raise WordListError("No start words available to begin a round")

        self.root_word = self.rng.choice(candidate_root_words).strip().lower()
        self.used_words = []
        self.round_number += 1
        logger.info("Round %s started with root word %r", self.round_number, self.root_word)
        return self.root_word

    def record_accepted_word(self, word: str, score_delta: float) -> None:
        """Push `word` to the front of used_words and add its points. No checks."""
        self.used_words.insert(0, word)
        self.score += score_delta

    def snapshot(self) -> Dict:
        return {
            "round": self.round_number,
            "root_word": self.root_word,
            "used_words": list(self.used_words),
            "score": self.score,
        }
