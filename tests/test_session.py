"""
Tests for GameSession: turn alternation, modes, computer replies, scoring.
"""

import random

import pytest

from conftest import parse_board
from engine.board import InvalidMoveError, Status
from engine.session import GameSession, Scoreboard


@pytest.fixture
def pvp():
    return GameSession(mode="pvp")


@pytest.fixture
def pvc():
    return GameSession(mode="pvc", rng=random.Random(3))


class TestPlayerVsPlayer:

    def test_play_when_pvp_then_marks_alternate(self, pvp):
        assert pvp.play(0)
        assert pvp.play(4)
        assert pvp.board[0] == "X"
        assert pvp.board[4] == "O"
        assert pvp.status == "Turn: X"

    def test_play_when_cell_occupied_then_ignored(self, pvp):
        pvp.play(0)
        assert not pvp.play(0)
        assert pvp.current_mark == "O"

    def test_play_when_index_out_of_range_then_raises(self, pvp):
        with pytest.raises(InvalidMoveError):
            pvp.play(9)

    def test_play_when_line_completed_then_score_recorded_once(self, pvp):
        for index in (0, 3, 1, 4, 2):
            pvp.play(index)
        assert pvp.status == "Player X wins!"
        assert pvp.outcome.line == (0, 1, 2)
        assert pvp.scores == Scoreboard(x=1, o=0, draws=0)
        # Further moves are ignored and do not score again.
        assert not pvp.play(8)
        assert pvp.scores.x == 1

    def test_play_when_board_fills_then_draw_recorded(self, pvp):
        for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
            pvp.play(index)
        assert pvp.outcome.status is Status.DRAW
        assert pvp.status == "It's a draw!"
        assert pvp.scores == Scoreboard(x=0, o=0, draws=1)

    def test_computer_move_when_pvp_then_none(self, pvp):
        pvp.play(0)
        assert pvp.computer_move() is None
        assert pvp.board.count(None) == 8


class TestPlayerVsComputer:

    def test_play_when_pvc_then_computer_pending_blocks_human(self, pvc):
        assert pvc.play(0)
        assert pvc.ai_thinking
        assert not pvc.play(1)

    def test_computer_move_when_x_took_corner_then_center(self, pvc):
        pvc.play(0)
        assert pvc.computer_move() == 4
        assert pvc.board[4] == "O"
        assert not pvc.ai_thinking
        assert pvc.x_is_next

    def test_computer_move_when_x_threatens_row_then_blocks(self, pvc):
        pvc.play(0)
        pvc.computer_move()
        pvc.play(1)
        assert pvc.computer_move() == 2

    def test_computer_move_when_x_to_move_then_none(self, pvc):
        assert pvc.computer_move() is None
        assert pvc.board == [None] * 9

    def test_computer_move_when_win_available_then_o_scores(self, pvc):
        pvc.board = parse_board("XX. OO. X..")
        pvc.x_is_next = False
        pvc.ai_thinking = True
        assert pvc.computer_move() == 5
        assert pvc.status == "Player O wins!"
        assert pvc.scores.o == 1

    def test_session_when_full_game_played_then_scored_once(self, pvc):
        rng = random.Random(11)
        while not pvc.outcome.is_over:
            empties = [i for i, cell in enumerate(pvc.board) if cell is None]
            pvc.play(rng.choice(empties))
            pvc.computer_move()
        total = pvc.scores.x + pvc.scores.o + pvc.scores.draws
        assert total == 1


class TestRoundControl:

    def test_reset_board_when_called_then_scores_kept(self, pvp):
        for index in (0, 3, 1, 4, 2):
            pvp.play(index)
        pvp.reset_board()
        assert pvp.board == [None] * 9
        assert pvp.x_is_next
        assert pvp.scores.x == 1

    def test_reset_scores_when_called_then_scores_and_board_cleared(self, pvp):
        for index in (0, 3, 1, 4, 2):
            pvp.play(index)
        pvp.reset_scores()
        assert pvp.scores == Scoreboard()
        assert pvp.board == [None] * 9

    def test_set_mode_when_switched_then_new_match(self, pvc):
        pvc.play(0)
        pvc.set_mode("pvp")
        assert pvc.mode == "pvp"
        assert pvc.board == [None] * 9
        assert not pvc.ai_thinking

    def test_set_mode_when_unknown_then_raises(self, pvc):
        with pytest.raises(ValueError, match="mode must be one of"):
            pvc.set_mode("online")

    def test_init_when_unknown_mode_then_raises(self):
        with pytest.raises(ValueError):
            GameSession(mode="cvc")
