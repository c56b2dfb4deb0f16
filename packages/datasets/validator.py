"""
Dataset validator for wordscramble.

What this module does:
- Validate a pair of word lists: start.txt (root words drawn each round) and
  the dictionary word list (what counts as a real word).
- Enforce formatting rules on the start list (lowercase, a–z only, at least
  3 letters, one per line). The dictionary is only required to be non-blank
  per line, since real word files carry apostrophes, hyphens and such.
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that start words ⊆ dictionary (a root word the dictionary doesn't
  know is a packaging smell, not a crash).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("packages/datasets/data/start.txt",
                             "packages/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine.scoring import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (start, dictionary) pair."""
    start: FileReport
    dictionary: FileReport
    start_subset_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, strict: bool) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - empty/whitespace-only lines are INVALID
      - strict only: must be lowercase a–z with at least MIN_WORD_LENGTH letters

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            wl = w.lower()
            if not strict:
                valid.append(wl)
            elif wl == w and wl.isalpha() and len(wl) >= MIN_WORD_LENGTH:
                valid.append(wl)
            else:
                invalid += 1

    return valid, invalid


def _as_dict(rep: ValidationReport) -> Dict:
    """Dataclass → plain dict (stable ordering)."""
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(start_path: str, dictionary_path: str) -> Dict:
    """
    Validate the start/dictionary word lists.

    Parameters
    ----------
    start_path : str
        Path to the root-word list (one word per line).
    dictionary_path : str
        Path to the dictionary word list (should be a superset of start words).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - start ⊆ dictionary check
          - `passed` boolean (strict: non-empty, no invalid start lines, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    start_p = Path(start_path)
    dict_p = Path(dictionary_path)

    start_exists = start_p.exists()
    dict_exists = dict_p.exists()

    # Early return if either file is missing
    if not start_exists or not dict_exists:
        if not start_exists:
            issues.append(f"start file not found: {start_path}")
        if not dict_exists:
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            start=FileReport(start_path, start_exists, 0, "", 0, 0),
            dictionary=FileReport(dictionary_path, dict_exists, 0, "", 0, 0),
            start_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return _as_dict(rep)

    # Load and validate content
    start, start_invalid = _load_and_check(start_p, strict=True)
    words, dict_invalid = _load_and_check(dict_p, strict=False)

    start_set = set(start)
    words_set = set(words)

    # Build file reports
    start_report = FileReport(
        path=str(start_p),
        exists=True,
        count=len(start),
        sha256=_sha256_file(start_p),
        unique_count=len(start_set),
        invalid_lines=start_invalid,
    )
    dict_report = FileReport(
        path=str(dict_p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(dict_p),
        unique_count=len(words_set),
        invalid_lines=dict_invalid,
    )

    # Logical checks & issue collection
    subset_ok = start_set.issubset(words_set)
    if not subset_ok:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        missing = sorted(start_set - words_set)[:5]
        issues.append(f"start words not subset of dictionary (e.g., {missing})")

    # Empty-file guardrails (useful to catch bad paths or preprocessing bugs)
    if start_report.count == 0:
        issues.append("start file contains 0 valid words")
    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid words")

    # Invalid-line diagnostics
    if start_invalid:
        issues.append(f"start has {start_invalid} invalid line(s)")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} blank line(s)")

    # Duplicate diagnostics (count vs unique_count mismatch)
    if start_report.count != start_report.unique_count:
        issues.append("start contains duplicate lines")

    # Strict pass criteria: non-empty + no invalid start lines + subset ok
    passed = (
            subset_ok
            and start_invalid == 0
            and start_report.count > 0
            and dict_report.count > 0
    )

    rep = ValidationReport(
        start=start_report,
        dictionary=dict_report,
        start_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return _as_dict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=50 (uniq=50, sha=abc123...) | dictionary=104334 (uniq=104334, sha=def456...) | start⊆dictionary=True | OK
    """
    a = report["start"]
    b = report["dictionary"]
    subset = report["start_subset_dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"start={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| start⊆dictionary={subset} | {status}"
    )
