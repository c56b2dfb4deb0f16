from __future__ import annotations
from typing import Dict, List, Type

# ---- Global dictionary registry ----
REGISTRY: Dict[str, Type["BaseDictionary"]] = {}


def register(cls: Type["BaseDictionary"]) -> Type["BaseDictionary"]:
    """
    Decorator: @register on a dictionary class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that dictionaries inherit ----
class BaseDictionary:
    """
    Spell-check capability used by the validation engine.

    A dictionary serves exactly one language; lookups for any other language
    are never recognized.
    """
    id = "base"
    name = "Base"

    def __init__(self, *, language: str = "en"):
        self.language = language
        self.words: frozenset = frozenset()

    def is_recognized_word(self, word: str, language: str = "en") -> bool:
        if language != self.language:
            return False
        return word.strip().lower() in self.words

    def __len__(self) -> int:
        return len(self.words)

    def word_list(self) -> List[str]:
        """All known words, sorted (stable input for the hint tool)."""
        return sorted(self.words)
