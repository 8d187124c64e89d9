"""
Board representation shared by the evaluator, the advisor, and the shells.

A board is a plain sequence of 9 cells, each either None (empty) or a mark
string. Functions here never mutate their input: placing a mark returns a
new list. This keeps the evaluator and advisor pure, so they are safe to
call from FastAPI's thread pool without any locking.

The Outcome type is the tagged result of evaluating a board. It is derived
on demand and never stored alongside the board.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from engine.constants import CELL_COUNT

Cell = str | None
Board = Sequence[Cell]


class InvalidBoardError(ValueError):
    """The board is not a 9-cell sequence of at most two distinct marks."""


class InvalidMoveError(ValueError):
    """A mark was placed out of range or on an occupied cell."""


class Status(str, Enum):
    """Tag of an Outcome. String-valued so it serializes directly to JSON."""

    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    Attributes:
        status: IN_PROGRESS, WIN or DRAW.
        winner: The winning mark for WIN, otherwise None.
        line:   The completed index triple for WIN, otherwise None.
    """

    status: Status
    winner: str | None = None
    line: tuple[int, int, int] | None = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(Status.IN_PROGRESS)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(Status.DRAW)

    @classmethod
    def win(cls, mark: str, line: tuple[int, int, int]) -> "Outcome":
        return cls(Status.WIN, winner=mark, line=line)

    @property
    def is_over(self) -> bool:
        """True once the round is decided (win or draw)."""
        return self.status is not Status.IN_PROGRESS


def new_board() -> list[Cell]:
    """Return a fresh empty board."""
    return [None] * CELL_COUNT


def validate_board(board: Board) -> None:
    """
    Fail fast on a malformed board.

    Raises:
        InvalidBoardError: wrong cell count, a cell that is neither None nor
            a non-empty string, or more than two distinct marks.
    """
    if len(board) != CELL_COUNT:
        raise InvalidBoardError(
            f"board must have exactly {CELL_COUNT} cells, got {len(board)}"
        )
    marks = set()
    for index, cell in enumerate(board):
        if cell is None:
            continue
        if not isinstance(cell, str) or not cell:
            raise InvalidBoardError(f"cell {index} holds an invalid mark: {cell!r}")
        marks.add(cell)
    if len(marks) > 2:
        raise InvalidBoardError(f"board holds more than two marks: {sorted(marks)}")


def empty_cells(board: Board) -> list[int]:
    """Indices of empty cells in ascending order."""
    return [i for i, cell in enumerate(board) if cell is None]


def place(board: Board, index: int, mark: str) -> list[Cell]:
    """
    Return a copy of the board with mark written at index.

    Raises:
        InvalidMoveError: index outside 0..8 or the cell is already taken.
    """
    if not 0 <= index < CELL_COUNT:
        raise InvalidMoveError(f"cell index must be 0-{CELL_COUNT - 1}, got {index}")
    if board[index] is not None:
        raise InvalidMoveError(f"cell {index} is already occupied by {board[index]}")
    copy = list(board)
    copy[index] = mark
    return copy


def render(board: Board) -> str:
    """Plain-text 3x3 picture of the board, '.' for empty cells."""
    rows = []
    for start in range(0, CELL_COUNT, 3):
        rows.append(" ".join(cell or "." for cell in board[start:start + 3]))
    return "\n".join(rows)
