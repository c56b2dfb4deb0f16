from pathlib import Path

import pytest
from packages.dictionaries import REGISTRY, create_dictionary
from packages.dictionaries.base import BaseDictionary, register


def test_registry_lists_builtin_dictionaries():
    assert {"static", "wordlist"} <= set(REGISTRY)


def test_unknown_dictionary_id():
    with pytest.raises(ValueError, match="Unknown dictionary id"):
        create_dictionary("nope")


def test_register_rejects_duplicate_ids():
    with pytest.raises(ValueError, match="Duplicate"):
        @register
        class Again(BaseDictionary):
            id = "static"


def test_static_dictionary_lookup():
    d = create_dictionary("static", ["Bat", " table ", ""])
    assert len(d) == 2
    assert d.is_recognized_word("bat", "en") is True
    assert d.is_recognized_word("BAT", "en") is True
    assert d.is_recognized_word("tab", "en") is False
    assert d.is_recognized_word("bat", "de") is False
    assert d.is_recognized_word(" Table ", "en") is True


def test_wordlist_dictionary_loads_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("bat\nTable\n\nheap\n", encoding="utf-8")
    d = create_dictionary("wordlist", p)
    assert d.word_list() == ["bat", "heap", "table"]
    assert d.is_recognized_word("table", "en")


def test_wordlist_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        create_dictionary("wordlist", tmp_path / "missing.txt")
