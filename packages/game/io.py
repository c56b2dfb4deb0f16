"""
I/O utilities for session reports.

Responsibilities:
- write_csv:     flatten per-submission rows into a tidy CSV (one row per submission).
- write_manifest:dump a JSON manifest with config, wordlist hashes, and final state.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Candidates are prefixed with an apostrophe when they start with a formula
  character (=, +, -, @) so spreadsheet apps show raw player input as text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["round", "root_word", "candidate", "outcome", "reason", "score_delta", "score"]

_FORMULA_PREFIXES = ("=", "+", "-", "@")


def _excel_safe(text: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "=cmd" -> "'=cmd"
    """
    return "'" + text if text.startswith(_FORMULA_PREFIXES) else text


def write_csv(rows: List[Dict], path: str) -> str:
    """
    Serialize a session's submissions to CSV.

    Schema (columns):
      round, root_word, candidate, outcome, reason, score_delta, score

    Args:
      rows : list of dicts as produced by game.core.play_session()["submissions"]
      path : output CSV path.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in rows:
            row = {k: r.get(k, "") for k in FIELDS}
            row["candidate"] = _excel_safe(str(row["candidate"]))
            row["score_delta"] = f"{float(r.get('score_delta', 0.0)):g}"
            row["score"] = f"{float(r.get('score', 0.0)):g}"
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest describing a session.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (paths, seed, language, dictionary id)
      - wordlists: output of datasets.validate_wordlists(...)
      - final: GameState.snapshot()
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
