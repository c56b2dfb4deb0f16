"""
In-memory dictionary.

Handy for tests and for embedding the game with a fixed vocabulary.
"""

from __future__ import annotations

from typing import Iterable
from .base import BaseDictionary, register


@register
class StaticDictionary(BaseDictionary):
    id = "static"
    name = "Static word set"

    def __init__(self, words: Iterable[str] = (), *, language: str = "en"):
        super().__init__(language=language)
        self.words = frozenset(w.strip().lower() for w in words if w.strip())
