from __future__ import annotations
from .base import BaseDictionary, REGISTRY, register

from . import static  # noqa: F401
from . import wordlist  # noqa: F401


def create_dictionary(dictionary_id: str, *args, **kwargs) -> BaseDictionary:
    """
    Factory: instantiate a registered dictionary by id.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(*args, **kwargs)

