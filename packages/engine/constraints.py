"""
Letter feasibility against a root word.

A candidate is feasible iff its letters form a sub-multiset of the root
word's letters: every letter may be used at most as many times as it occurs
in the root.

  is_possible("bat", "alphabet")   -> True
  is_possible("tall", "alphabet")  -> False   (only one 'l')
"""

from collections import Counter
from typing import Iterable, List


def is_possible(word: str, root: str) -> bool:
    """
    Return True if `word` can be spelled with the letters of `root`.

    Walks the candidate left to right, consuming one matching letter from the
    remaining pool each time; the first letter that has run out fails.
    """
    remaining = Counter(root)
    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True


def filter_candidates(words: Iterable[str], root: str, *, min_length: int = 1) -> List[str]:
    """
    Keep only words (normalized to lowercase) that are feasible from `root`.

    Args:
      words      : iterable of words (often a dictionary word list)
      root       : the round's root word
      min_length : drop anything shorter than this

    Returns:
      List[str] of feasible words, order preserved as in `words`. The root
      word itself is not excluded here; that is a validation rule.
    """
    root = root.strip().lower()
    pool = Counter(root)
    out: List[str] = []

    for w in words:
        w = w.strip().lower()

        # Cheap rejects before counting letters
        if len(w) < min_length or len(w) > len(root):
            continue
        if not set(w) <= pool.keys():
            continue

        if is_possible(w, root):
            out.append(w)

    return out
