from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


class WordListError(RuntimeError):
    """The start-word list is missing, unreadable or empty. Not recoverable."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_root_words(p: Path | str) -> List[str]:
    """
    Load the start-word list (one root word per line), lowercased, blanks dropped.

    Raises WordListError if the file can't be read or holds no words; the game
    has nothing to play without it.
    """
    try:
        lines = read_lines(p)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Could not load start words from {p}: {e}") from e

    words = [ln.strip().lower() for ln in lines if ln.strip()]
    if not words:
        raise WordListError(f"Start word list {p} contains no words")

    logger.info("Loaded %s start words from %s", len(words), p)
    return words
