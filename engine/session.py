"""
Game session: turn alternation, game mode and scoreboard for one player.

The evaluator and advisor are pure; this module owns the mutable state that
sits around them while someone plays. It mirrors what the browser frontend
keeps in its own JavaScript state, so the console interface and the tests
can drive complete rounds in Python.

Lifecycle of a round: idle (empty board) -> in progress -> decided. A new
round starts from reset_board()/new_match(); scores survive new rounds and
are cleared only by reset_scores().

In "pvc" mode the human is always X and moves first; the computer is O.
After a human move that leaves the round open, the session is marked as
waiting for the computer (ai_thinking) and further human moves are ignored
until computer_move() runs.
"""

import logging
from dataclasses import dataclass, field

from engine.board import Cell, InvalidMoveError, Outcome, Status, new_board, place
from engine.constants import CELL_COUNT, MARK_O, MARK_X, MODE_PVC, MODES
from engine.evaluate import evaluate
from engine.search import RandomSource, choose_move

_log = logging.getLogger(__name__)


@dataclass
class Scoreboard:
    """Wins per mark and draws, counted once per decided round."""

    x: int = 0
    o: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome.status is Status.DRAW:
            self.draws += 1
        elif outcome.winner == MARK_X:
            self.x += 1
        elif outcome.winner == MARK_O:
            self.o += 1

    def reset(self) -> None:
        self.x = self.o = self.draws = 0


@dataclass
class GameSession:
    """
    Mutable state of one game.

    Attributes:
        mode:        "pvc" (human X vs computer O) or "pvp".
        board:       The current board.
        x_is_next:   True when X is to move.
        scores:      Scoreboard across rounds.
        ai_thinking: True while a computer move is pending in pvc mode.
        rng:         Random source handed to the advisor; None uses the
                     module-level generator.
    """

    mode: str = MODE_PVC
    board: list[Cell] = field(default_factory=new_board)
    x_is_next: bool = True
    scores: Scoreboard = field(default_factory=Scoreboard)
    ai_thinking: bool = False
    rng: RandomSource | None = None

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")

    @property
    def current_mark(self) -> str:
        return MARK_X if self.x_is_next else MARK_O

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.board)

    @property
    def status(self) -> str:
        """Human-readable status line."""
        outcome = self.outcome
        if outcome.status is Status.DRAW:
            return "It's a draw!"
        if outcome.status is Status.WIN:
            return f"Player {outcome.winner} wins!"
        return f"Turn: {self.current_mark}"

    # -----------------------------------------------------------------------
    # Moves
    # -----------------------------------------------------------------------

    def play(self, index: int) -> bool:
        """
        Apply a human move for the side to move.

        Returns:
            True if the move was applied. False when the round is already
            decided, the cell is taken, or the computer's move is pending.

        Raises:
            InvalidMoveError: index outside 0..8.
        """
        if not 0 <= index < CELL_COUNT:
            raise InvalidMoveError(f"cell index must be 0-{CELL_COUNT - 1}, got {index}")
        if self.outcome.is_over or self.board[index] is not None:
            return False
        if self.mode == MODE_PVC and self.ai_thinking:
            return False

        self._apply(index, self.current_mark)
        if self.mode == MODE_PVC and not self.x_is_next and not self.outcome.is_over:
            self.ai_thinking = True
        return True

    def computer_move(self) -> int | None:
        """
        Let the computer (O) move in pvc mode.

        Returns:
            The cell the computer played, or None when it is not the
            computer's turn or no move is available.
        """
        if self.mode != MODE_PVC or self.x_is_next or self.outcome.is_over:
            self.ai_thinking = False
            return None

        move = choose_move(self.board, MARK_O, MARK_X, self.rng)
        if move is not None:
            self._apply(move, MARK_O)
        self.ai_thinking = False
        return move

    def _apply(self, index: int, mark: str) -> None:
        self.board = place(self.board, index, mark)
        self.x_is_next = not self.x_is_next
        outcome = self.outcome
        if outcome.is_over:
            self.scores.record(outcome)
            _log.info("round decided: %s", outcome.winner or "draw")

    # -----------------------------------------------------------------------
    # Round and match control
    # -----------------------------------------------------------------------

    def reset_board(self) -> None:
        self.board = new_board()
        self.x_is_next = True
        self.ai_thinking = False

    def new_match(self) -> None:
        self.reset_board()

    def reset_scores(self) -> None:
        self.scores.reset()
        self.reset_board()

    def set_mode(self, mode: str) -> None:
        """Switch between "pvc" and "pvp" and start a new match."""
        if mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {mode!r}")
        self.mode = mode
        self.new_match()
