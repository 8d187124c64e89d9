"""
Board evaluation: decide whether a round is won, drawn, or still running.

The evaluator walks the 8 fixed lines in enumeration order (rows, columns,
diagonals) and reports the first line whose three cells hold the same mark.
Under normal alternating play at most one line can be complete; a board
with several complete lines (only reachable by building it by hand) resolves
to the first one in that order.

If no line is complete the board is a draw when full, otherwise the round is
still in progress. The function is pure: it never touches its input and
returns the same Outcome every time for the same board.
"""

from engine.board import Board, Outcome, validate_board
from engine.constants import LINES


def evaluate(board: Board) -> Outcome:
    """
    Classify a board as a win, a draw, or in progress.

    Args:
        board: 9 cells, each None or a mark. Not modified.

    Returns:
        Outcome.win(mark, line) for the first completed line, Outcome.draw()
        for a full board with no line, otherwise Outcome.in_progress().

    Raises:
        InvalidBoardError: the board is not 9 cells of at most two marks.

    Example:
        >>> evaluate(["X", "X", "X", None, "O", "O", None, None, None]).line
        (0, 1, 2)
    """
    validate_board(board)
    return _evaluate_unchecked(board)


def _evaluate_unchecked(board: Board) -> Outcome:
    # The advisor calls this for every simulated placement on a board it has
    # already validated once.
    for line in LINES:
        a, b, c = line
        mark = board[a]
        if mark is not None and mark == board[b] == board[c]:
            return Outcome.win(mark, line)

    if all(cell is not None for cell in board):
        return Outcome.draw()

    return Outcome.in_progress()
