"""
Tests for the command-line interface.
"""

import pytest

from .. import cli


@pytest.fixture
def pool_file(tmp_path):
    path = tmp_path / "start.txt"
    path.write_text("silkworm\n", encoding="utf-8")
    return path


@pytest.fixture
def wordlist_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("silk\nworm\nmilk\n", encoding="utf-8")
    return path


def feed_input(monkeypatch, lines):
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_pick(pool_file, capsys):
    cli.main(["pick", "--pool", str(pool_file)])

    assert capsys.readouterr().out.strip() == "silkworm"


def test_pick_missing_pool(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["pick", "--pool", str(tmp_path / "missing.txt")])

    assert exc.value.code == 1
    assert "Error" in capsys.readouterr().out


def test_play_session(pool_file, wordlist_file, monkeypatch, capsys):
    feed_input(monkeypatch, ["silk", "silk", "  ", ":new", "worm", ":quit"])

    cli.main([
        "play",
        "--pool", str(pool_file),
        "--dictionary", "wordlist",
        "--wordlist", str(wordlist_file),
    ])

    out = capsys.readouterr().out
    assert "=== silkworm ===" in out
    assert "Word used already" in out
    assert "(4) silk" in out
    assert "Final score: 18" in out


def test_play_ends_on_eof(pool_file, wordlist_file, monkeypatch, capsys):
    feed_input(monkeypatch, ["milk"])

    cli.main([
        "play",
        "--pool", str(pool_file),
        "--dictionary", "wordlist",
        "--wordlist", str(wordlist_file),
    ])

    assert "Final score: 10" in capsys.readouterr().out


def test_no_command_prints_help():
    with pytest.raises(SystemExit):
        cli.main([])
