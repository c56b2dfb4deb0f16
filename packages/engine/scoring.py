"""
Scoring for accepted words.

Longer words are rewarded exponentially:
  - 3 letters -> 1
  - 4 letters -> 2
  - 5 letters -> 4
  - ...

The score is kept as a float so it can be summed straight into the running
total held by the game state.
"""

# Shortest word that is worth anything; also the exponent offset.
MIN_WORD_LENGTH = 3


def score_delta(word: str) -> float:
    """
    Points earned by an accepted `word`: 2 ** (len(word) - 3).

    Examples:
      score_delta("bat")   -> 1.0
      score_delta("table") -> 4.0
    """
    return 2.0 ** (len(word) - MIN_WORD_LENGTH)


def max_score(words) -> float:
    """Sum of score_delta over `words` (e.g. every acceptable word for a root)."""
    return sum(score_delta(w) for w in words)
