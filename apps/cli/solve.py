# apps/cli/solve.py
"""
Hint tool: list every word the game would accept for a root word.

Scans the dictionary word list, keeps the words spellable from the root,
then runs each survivor through the same validation pipeline the game uses
(on an empty round), so the output is exactly what a player could score.

Usage:
    python -m apps.cli.solve alphabet
    python -m apps.cli.solve --random --seed 7 --top 20
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from tqdm import tqdm

from packages.config import Config
from packages.datasets import load_root_words, WordListError
from packages.dictionaries import create_dictionary
from packages.engine import Accepted, filter_candidates, max_score, validate, MIN_WORD_LENGTH
from packages.game import GameState


def acceptable_words(root: str, dictionary, *, language: str = "en",
                     progress: bool = False) -> List[str]:
    """
    All words accepted for `root` on a fresh round, longest first then A–Z.
    """
    state = GameState()
    state.root_word = root.strip().lower()

    words = dictionary.word_list()
    feasible = filter_candidates(
        tqdm(words, desc="Scanning", unit="word", ncols=80, disable=not progress),
        state.root_word,
        min_length=MIN_WORD_LENGTH,
    )

    out = []
    for w in feasible:
        if isinstance(validate(w, state, dictionary, language=language), Accepted):
            out.append(w)
    return sorted(out, key=lambda w: (-len(w), w))


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordscramble — list all acceptable words")
    ap.add_argument("root", nargs="?", help="root word (omit with --random)")
    ap.add_argument("--random", action="store_true", help="draw the root word from the start list")
    ap.add_argument("--start", default=Config.START_WORDS_PATH, help="path to the start-word list")
    ap.add_argument("--dictionary", default=Config.DICTIONARY_PATH,
                    help="path to the dictionary word list")
    ap.add_argument("--language", default=Config.LANGUAGE, help="dictionary language")
    ap.add_argument("--seed", type=int, default=Config.SEED, help="RNG seed for --random")
    ap.add_argument("--top", type=int, help="print only the first K words")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show scan progress (auto=bar when stderr is a terminal)."
    )
    args = ap.parse_args(argv)

    if not args.root and not args.random:
        ap.error("give a root word or --random")

    root = args.root
    if args.random:
        try:
            state = GameState(seed=args.seed)
            root = state.start_round(load_root_words(args.start))
        except WordListError as e:
            print(f"fatal: {e}", file=sys.stderr)
            return 1

    try:
        dictionary = create_dictionary("wordlist", args.dictionary, language=args.language)
    except FileNotFoundError as e:
        print(f"fatal: dictionary not found: {e} "
              "(fetch one with `python -m script.fetch_wordlist`)", file=sys.stderr)
        return 1

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    words = acceptable_words(root, dictionary, language=args.language, progress=progress)

    shown = words[: args.top] if args.top else words
    print(f"{root}: {len(words)} words, max score {max_score(words):g}")
    for w in shown:
        print(f"  ({len(w)}) {w}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
