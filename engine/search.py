"""
Move advisor: the computer opponent's greedy, rule-ordered move picker.

This module defines the stable public interface that web/app.py, the console
interface and tools/arena.py depend on. choose_move() returns a cell index;
explain_move() additionally names the rule that produced it.

Rule priority (first rule that yields a cell wins):

1. win     - a cell that completes a line for the advisor right now.
2. block   - a cell the opponent would use to complete a line next turn.
3. center  - cell 4.
4. corner  - a random empty corner (0, 2, 6, 8).
5. side    - a random empty side (1, 3, 5, 7).
6. fallback - the lowest empty cell.

Rules 1 and 2 scan empty cells in ascending order and take the first hit,
so they are deterministic. Rules 4 and 5 draw from an injectable random
source; pass a seeded random.Random to reproduce a game exactly.

This is a one-ply lookahead. It never plays into a fork deliberately, but
it also does not see an opponent fork coming, so it can be beaten. That is
the intended strength of the computer player.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

from engine.board import Board, InvalidBoardError, Status, empty_cells, validate_board
from engine.constants import CENTER, CORNERS, SIDES
from engine.evaluate import _evaluate_unchecked

_log = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with random.Random's choice() method."""

    def choice(self, seq: Sequence[int]) -> int: ...


class Rule(str, Enum):
    """The advisor rule that selected a move."""

    WIN = "win"
    BLOCK = "block"
    CENTER = "center"
    CORNER = "corner"
    SIDE = "side"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class MoveChoice:
    """
    A move picked by the advisor.

    Attributes:
        index: Cell index 0..8.
        rule:  Which rule picked it.
    """

    index: int
    rule: Rule


def _completing_cell(board: Board, mark: str, candidates: list[int]) -> int | None:
    """First candidate cell that would complete a line for mark."""
    for index in candidates:
        trial = list(board)
        trial[index] = mark
        outcome = _evaluate_unchecked(trial)
        if outcome.status is Status.WIN and outcome.winner == mark:
            return index
    return None


def explain_move(
    board: Board,
    advisor_mark: str,
    opponent_mark: str,
    rng: RandomSource | None = None,
) -> MoveChoice | None:
    """
    Pick the advisor's next move and report the rule behind it.

    Args:
        board:         9 cells, each None or a mark. Not modified.
        advisor_mark:  The mark the advisor places.
        opponent_mark: The other mark in play.
        rng:           Random source for the corner/side rules. Defaults to
                       the module-level random generator.

    Returns:
        MoveChoice(index, rule), or None when the board has no empty cell.

    Raises:
        InvalidBoardError: malformed board, or the two marks are empty or
            identical, or the board holds a mark that is neither of them.
    """
    validate_board(board)
    if not advisor_mark or not opponent_mark:
        raise InvalidBoardError("advisor and opponent marks must be non-empty")
    if advisor_mark == opponent_mark:
        raise InvalidBoardError(f"advisor and opponent share the mark {advisor_mark!r}")

    foreign = {cell for cell in board if cell is not None} - {advisor_mark, opponent_mark}
    if foreign:
        raise InvalidBoardError(
            f"board holds marks {sorted(foreign)} not in play "
            f"(advisor {advisor_mark!r}, opponent {opponent_mark!r})"
        )

    moves = empty_cells(board)
    if not moves:
        return None

    rng = rng if rng is not None else random

    index = _completing_cell(board, advisor_mark, moves)
    if index is not None:
        return _chosen(index, Rule.WIN)

    index = _completing_cell(board, opponent_mark, moves)
    if index is not None:
        return _chosen(index, Rule.BLOCK)

    if board[CENTER] is None:
        return _chosen(CENTER, Rule.CENTER)

    corners = [i for i in CORNERS if board[i] is None]
    if corners:
        return _chosen(rng.choice(corners), Rule.CORNER)

    sides = [i for i in SIDES if board[i] is None]
    if sides:
        return _chosen(rng.choice(sides), Rule.SIDE)

    # Unreachable on a 3x3 board (center, corners and sides cover every cell),
    # kept so the advisor stays total if the cell groups ever change.
    return _chosen(moves[0], Rule.FALLBACK)


def _chosen(index: int, rule: Rule) -> MoveChoice:
    _log.debug("advisor picked cell %d by rule %s", index, rule.value)
    return MoveChoice(index, rule)


def choose_move(
    board: Board,
    advisor_mark: str,
    opponent_mark: str,
    rng: RandomSource | None = None,
) -> int | None:
    """
    Return the advisor's next cell index, or None if no move is available.

    See explain_move() for the arguments and rule order.
    """
    choice = explain_move(board, advisor_mark, opponent_mark, rng)
    return None if choice is None else choice.index
