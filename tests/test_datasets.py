from pathlib import Path

import pytest
from packages.datasets import (
    validate_wordlists, pretty_summary, load_root_words, read_lines, write_lines, WordListError,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words.txt"
    _write(start, ["alphabet", "notebook"])
    _write(words, ["alphabet", "notebook", "bat", "book", "don't"])

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is True
    assert rep["start_subset_dictionary"] is True
    assert rep["dictionary"]["count"] == 5
    s = pretty_summary(rep)
    assert "start=2" in s and "start⊆dictionary=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words.txt"
    # 'ab' too short, 'Umbrella' not lowercase, '???' not letters, blank line
    start.write_text("alphabet\nab\nUmbrella\n???\n\n", encoding="utf-8")
    _write(words, ["alphabet"])

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is False
    assert rep["start"]["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words.txt"
    _write(start, ["alphabet", "notebook", "alphabet"])
    _write(words, ["alphabet"])

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is False
    assert rep["start_subset_dictionary"] is False
    assert any("subset" in msg for msg in rep["issues"])
    assert "start contains duplicate lines" in rep["issues"]


def test_validate_wordlists_missing_files(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path / "a.txt"), str(tmp_path / "b.txt"))
    assert rep["passed"] is False
    assert len(rep["issues"]) == 2
    assert "FAIL" in pretty_summary(rep)


def test_load_root_words_normalizes(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Alphabet\r\n\n  notebook  \n", encoding="utf-8")
    assert load_root_words(p) == ["alphabet", "notebook"]


def test_load_root_words_missing_is_fatal(tmp_path: Path):
    with pytest.raises(WordListError):
        load_root_words(tmp_path / "start.txt")


def test_load_root_words_empty_is_fatal(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("\n  \n", encoding="utf-8")
    with pytest.raises(WordListError, match="no words"):
        load_root_words(p)


def test_write_then_read_lines(tmp_path: Path):
    p = tmp_path / "nested" / "out.txt"
    write_lines(["bat", "tab"], p)
    assert p.read_text(encoding="utf-8") == "bat\ntab\n"
    assert read_lines(p) == ["bat", "tab"]


def test_bundled_start_list_is_clean():
    root = Path(__file__).resolve().parents[1]
    words = load_root_words(root / "packages" / "datasets" / "data" / "start.txt")
    assert words and all(w.isalpha() and len(w) >= 3 for w in words)
