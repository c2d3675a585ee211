"""Tests for the command-line entry point."""

import random
import pytest

import main


def _run(monkeypatch, *args):
    monkeypatch.setattr("sys.argv", ["main.py", *args])
    main.main()


def test_no_command_prints_usage(monkeypatch, capsys):
    """Running without a command lists the commands and exits 1."""
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch)
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "Available commands:" in out
    for name in main.COMMANDS:
        assert name in out


def test_unknown_command_prints_usage(monkeypatch, capsys):
    """An unknown command is rejected with the usage text."""
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "serve")
    assert exc.value.code == 1
    assert "Available commands:" in capsys.readouterr().out


def test_score_needs_two_players(monkeypatch, capsys):
    """score without both player names exits 1."""
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "score", "A")
    assert exc.value.code == 1
    assert "Usage: python main.py score" in capsys.readouterr().out


def test_score_unknown_winner(monkeypatch, capsys):
    """A winner outside the game is reported and exits 1."""
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "score", "A", "B", "A", "C")
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert 'Error: Player with the name "C" does not play in this match.' in out


def test_score_prints_each_call(monkeypatch, capsys):
    """Every point is printed with the call after it."""
    _run(monkeypatch, "score", "A", "B", "A", "A", "B", "A", "A")
    out = capsys.readouterr().out
    assert "A vs B" in out
    assert "Start: Love-All" in out
    assert "-> Fifteen-Love" in out
    assert "-> Forty-Fifteen" in out
    assert out.rstrip().endswith("-> Win for A")


def test_score_without_points(monkeypatch, capsys):
    """Just the two players: only the starting call."""
    _run(monkeypatch, "score", "A", "B")
    out = capsys.readouterr().out
    assert "Start: Love-All" in out
    assert "Point" not in out


def test_game_prints_result(monkeypatch, capsys):
    """A simulated game ends with the final call and the winner."""
    random.seed(42)
    _run(monkeypatch, "game", "pro", "beginner")
    out = capsys.readouterr().out
    assert "Professional" in out
    assert "Beginner" in out
    assert "FINAL CALL: Win for " in out
    assert "WINNER: " in out


def test_game_unknown_style_falls_back(monkeypatch, capsys):
    """Unrecognised styles use the default matchup."""
    random.seed(1)
    _run(monkeypatch, "game", "lefty", "righty")
    out = capsys.readouterr().out
    assert "Aggressive" in out
    assert "Defensive" in out
