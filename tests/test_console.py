"""
Tests for the console protocol handler.
"""

import random

import pytest

from engine.session import GameSession
from interface.console import ConsoleHandler, run_console_loop


@pytest.fixture
def handler():
    return ConsoleHandler(GameSession(rng=random.Random(0)))


def _lines(capsys) -> list[str]:
    return capsys.readouterr().out.splitlines()


def test_play_when_pvc_then_computer_replies(handler, capsys):
    handler.dispatch("play", ["0"])
    assert _lines(capsys) == ["move X 0", "move O 4", "status Turn: X"]


def test_play_when_cell_occupied_then_ignored(handler, capsys):
    handler.dispatch("play", ["0"])
    capsys.readouterr()
    handler.dispatch("play", ["4"])
    assert _lines(capsys) == ["ignored 4"]


def test_play_when_pvp_then_no_reply(handler, capsys):
    handler.dispatch("mode", ["pvp"])
    handler.dispatch("play", ["8"])
    assert _lines(capsys) == ["mode pvp", "move X 8", "status Turn: O"]


def test_board_and_scores_when_requested_then_printed(handler, capsys):
    handler.dispatch("play", ["0"])
    capsys.readouterr()
    handler.dispatch("board", [])
    handler.dispatch("scores", [])
    assert _lines(capsys) == ["X . .", ". O .", ". . .", "scores x=0 o=0 draws=0"]


def test_play_when_index_not_a_number_then_raises(handler):
    with pytest.raises(ValueError):
        handler.dispatch("play", ["nine"])


def test_quit_when_dispatched_then_exits(handler):
    with pytest.raises(SystemExit):
        handler.dispatch("quit", [])


def test_loop_when_commands_fail_then_keeps_reading(capsys):
    run_console_loop(["mode chess", "play 12", "", "bogus", "mode pvp", "scores"])
    assert _lines(capsys) == ["mode pvp", "scores x=0 o=0 draws=0"]


def test_loop_when_pvp_win_played_then_scored(capsys):
    commands = ["mode pvp", "play 0", "play 3", "play 1", "play 4", "play 2", "scores", "new", "board"]
    run_console_loop(commands)
    out = _lines(capsys)
    assert "status Player X wins!" in out
    assert "scores x=1 o=0 draws=0" in out
    assert out[-3:] == [". . .", ". . .", ". . ."]
