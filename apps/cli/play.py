# apps/cli/play.py
"""
CLI entry point for playing wordscramble in the terminal.

This script:
  1) Validates the word lists (prints counts + SHA, checks start ⊆ dictionary).
  2) Loads the start words; a missing or empty list stops the program here.
  3) Loads the dictionary and starts a round.
  4) Reads one candidate per line and prints the outcome, or with --script
     plays a file of candidates non-interactively.
  5) Optionally writes:
       - CSV:  one row per submission
       - JSON: manifest with config, wordlist hashes, final state

Commands while playing:
  :new    start a new round with a fresh root word (score is kept)
  :words  list the words found this round
  :quit   leave the game
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

from packages.config import Config
from packages.datasets import validate_wordlists, pretty_summary, load_root_words, WordListError
from packages.datasets.io import read_lines
from packages.dictionaries import create_dictionary
from packages.engine import Accepted, Rejected
from packages.game import GameState, submit, play_session, NEW_ROUND_COMMAND
from packages.game.core import submission_row
from packages.game.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.game.messages import describe, format_score

logger = logging.getLogger(__name__)

WORDS_COMMAND = ":words"
QUIT_COMMAND = ":quit"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _print_header(state: GameState) -> None:
    print()
    print(f"== {state.root_word} ==   {format_score(state.score)}")


def _print_words(state: GameState) -> None:
    if not state.used_words:
        print("(no words yet)")
        return
    for w in state.used_words:
        # length badge, newest first
        print(f"  ({len(w)}) {w}")


def _print_outcome(outcome) -> None:
    if isinstance(outcome, Accepted):
        print(f"  + {outcome.word} ({outcome.score_delta:g})")
    elif isinstance(outcome, Rejected):
        title, message = describe(outcome.reason)
        print(f"  ! {title}: {message}")


def _interactive(state: GameState, root_words: List[str], dictionary, language: str) -> List[Dict]:
    """
    Read-eval loop on stdin. Returns the per-submission rows for reporting.
    """
    rows: List[Dict] = []
    _print_header(state)

    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            break

        cmd = line.strip()
        if cmd == QUIT_COMMAND:
            break
        if cmd == NEW_ROUND_COMMAND:
            state.start_round(root_words)
            _print_header(state)
            continue
        if cmd == WORDS_COMMAND:
            _print_words(state)
            continue

        outcome = submit(state, line, dictionary, language=language)
        if outcome is None:
            continue  # blank line
        rows.append(submission_row(state, line, outcome))
        _print_outcome(outcome)
        if isinstance(outcome, Accepted):
            print(f"  {format_score(state.score)}")

    return rows


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate word lists, play, and optionally write a report.
    """
    ap = argparse.ArgumentParser(description="wordscramble — make words from the root word")
    ap.add_argument("--start", default=Config.START_WORDS_PATH,
                    help="path to the start-word list (one root word per line)")
    ap.add_argument("--dictionary", default=Config.DICTIONARY_PATH,
                    help="path to the dictionary word list")
    ap.add_argument("--language", default=Config.LANGUAGE, help="dictionary language")
    ap.add_argument("--seed", type=int, default=Config.SEED,
                    help="RNG seed for root word draws (for reproducibility)")
    ap.add_argument("--script", help="file of candidates to play non-interactively "
                                     f"(one per line, '{NEW_ROUND_COMMAND}' starts a new round)")
    ap.add_argument("--report", action="store_true", help="write CSV + manifest at the end")
    ap.add_argument("--outdir", default=Config.REPORTS_DIR, help="directory for report files")
    ap.add_argument("--log-level", default=Config.LOG_LEVEL,
                    type=str.upper, choices=LOG_LEVELS)
    args = ap.parse_args(argv)
    # choices are not checked for env-provided defaults
    if args.log_level not in LOG_LEVELS:
        ap.error(f"invalid log level: {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.start, args.dictionary)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        logger.warning("word lists: %s", issue)

    # 2) Start words are a hard precondition
    try:
        root_words = load_root_words(args.start)
    except WordListError as e:
        print(f"fatal: {e}", file=sys.stderr)
        return 1

    # 3) Dictionary + first round
    try:
        dictionary = create_dictionary("wordlist", args.dictionary, language=args.language)
    except FileNotFoundError as e:
        print(f"fatal: dictionary not found: {e} "
              "(fetch one with `python -m script.fetch_wordlist`)", file=sys.stderr)
        return 1

    state = GameState(seed=args.seed)
    state.start_round(root_words)

    # 4) Play
    if args.script:
        try:
            script_lines = read_lines(args.script)
        except (OSError, UnicodeDecodeError) as e:
            print(f"fatal: could not read script {args.script}: {e}", file=sys.stderr)
            return 1
        result = play_session(state, script_lines, dictionary,
                              root_words=root_words, language=args.language)
        rows = result["submissions"]
        for r in rows:
            print(f"[{r['root_word']}] {r['candidate']!r}: {r['outcome']} {r['reason']}".rstrip())
        print(f"accepted={result['accepted']} rejected={result['rejected']} | "
              f"{format_score(state.score)}")
    else:
        rows = _interactive(state, root_words, dictionary, args.language)
        print(format_score(state.score))

    # 5) Report
    if args.report:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"session_{run_id}.csv"
        manifest_path = outdir / f"session_{run_id}_manifest.json"

        write_csv(rows, str(csv_path))
        write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlists": rep,
            "num_submissions": len(rows),
            "final": state.snapshot(),
        }, str(manifest_path))

        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
