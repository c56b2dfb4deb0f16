from pathlib import Path

import pytest
from apps.cli import play, solve
from packages.config import Config
from packages.dictionaries.static import StaticDictionary

WORDS = ["alphabet", "bat", "tab", "hat", "lap", "heap", "leap", "pale", "alpha", "table", "ab"]


@pytest.fixture()
def lists(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words.txt"
    start.write_text("alphabet\n", encoding="utf-8")
    words.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return start, words


def test_play_script_with_report(lists, tmp_path: Path, capsys):
    start, words = lists
    script = tmp_path / "moves.txt"
    script.write_text("bat\ntable\nbat\nxyz\n:new\nbat\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = play.main(["--start", str(start), "--dictionary", str(words), "--seed", "1",
                    "--script", str(script), "--report", "--outdir", str(outdir)])

    assert rc == 0
    out = capsys.readouterr().out
    assert "accepted=3 rejected=2" in out
    assert "Score: 6" in out
    assert len(list(outdir.glob("session_*.csv"))) == 1
    assert len(list(outdir.glob("session_*_manifest.json"))) == 1


def test_play_interactive(lists, monkeypatch, capsys):
    start, words = lists
    lines = iter(["heap", "heap", "", ":words", ":new", "Tab", ":quit", "never read"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    rc = play.main(["--start", str(start), "--dictionary", str(words)])

    assert rc == 0
    out = capsys.readouterr().out
    assert "== alphabet ==" in out
    assert "+ heap (2)" in out
    assert "Word already used: Be more original!" in out
    assert "(4) heap" in out
    assert out.rstrip().endswith("Score: 3")


def test_play_interactive_stops_on_eof(lists, monkeypatch, capsys):
    start, words = lists

    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert play.main(["--start", str(start), "--dictionary", str(words)]) == 0
    assert "Score: 0" in capsys.readouterr().out


def test_play_missing_start_list_is_fatal(lists, tmp_path: Path, capsys):
    _, words = lists
    rc = play.main(["--start", str(tmp_path / "nope.txt"), "--dictionary", str(words)])
    assert rc == 1
    assert "fatal" in capsys.readouterr().err


def test_play_missing_dictionary_is_fatal(lists, tmp_path: Path, capsys):
    start, _ = lists
    rc = play.main(["--start", str(start), "--dictionary", str(tmp_path / "nope.txt")])
    assert rc == 1
    assert "dictionary not found" in capsys.readouterr().err


def test_acceptable_words_matches_validation():
    words = solve.acceptable_words("alphabet", StaticDictionary(WORDS + ["xyz"]))
    assert words == ["alpha", "table", "heap", "leap", "pale", "bat", "hat", "lap", "tab"]


def test_solve_cli(lists, capsys):
    start, words = lists
    rc = solve.main(["--random", "--start", str(start), "--dictionary", str(words),
                     "--progress", "off", "--top", "2"])
    assert rc == 0
    out = capsys.readouterr().out
    # 2 * 4 + 3 * 2 + 4 * 1
    assert "alphabet: 9 words, max score 18" in out
    assert "(5) alpha" in out and "(4) heap" not in out


def test_play_missing_script_is_fatal(lists, tmp_path: Path, capsys):
    start, words = lists
    rc = play.main(["--start", str(start), "--dictionary", str(words),
                    "--script", str(tmp_path / "nope.txt")])
    assert rc == 1
    assert "could not read script" in capsys.readouterr().err


def test_solve_missing_dictionary_is_fatal(tmp_path: Path, capsys):
    rc = solve.main(["alphabet", "--dictionary", str(tmp_path / "nope.txt")])
    assert rc == 1
    assert "dictionary not found" in capsys.readouterr().err


def test_seed_from_environment_is_parsed_by_cli(lists, monkeypatch, capsys):
    start, words = lists
    monkeypatch.setattr(Config, "SEED", "not-a-number")
    with pytest.raises(SystemExit) as exc:
        play.main(["--start", str(start), "--dictionary", str(words), "--script", str(start)])
    assert exc.value.code == 2
    assert "invalid int value" in capsys.readouterr().err


def test_log_level_from_environment_is_case_insensitive(lists, monkeypatch):
    start, words = lists
    monkeypatch.setattr(Config, "LOG_LEVEL", "info")
    assert play.main(["--start", str(start), "--dictionary", str(words),
                      "--script", str(start)]) == 0


def test_bad_log_level_from_environment(lists, monkeypatch, capsys):
    start, words = lists
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    with pytest.raises(SystemExit) as exc:
        play.main(["--start", str(start), "--dictionary", str(words)])
    assert exc.value.code == 2
    assert "invalid log level" in capsys.readouterr().err
