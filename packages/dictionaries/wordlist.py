"""
Word-list dictionary.

Loads a newline-delimited UTF-8 word file (e.g. a hunspell/aspell export or
/usr/share/dict/words) into a set once, then answers lookups from memory.

Notes:
  - Entries are lowercased; blank lines are skipped.
  - Entries with apostrophes or other non-letters are kept as-is; they simply
    never match a candidate the player could spell from a root word.
"""

from __future__ import annotations

import logging
from pathlib import Path

from packages.datasets.io import read_lines
from .base import BaseDictionary, register

logger = logging.getLogger(__name__)


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Word list file"

    def __init__(self, path: Path | str, *, language: str = "en"):
        super().__init__(language=language)
        self.path = Path(path)
        # read_lines raises FileNotFoundError for a missing file
        self.words = frozenset(
            w.strip().lower() for w in read_lines(self.path) if w.strip()
        )
        logger.info("Loaded %s dictionary words (%s) from %s",
                    len(self.words), self.language, self.path)
