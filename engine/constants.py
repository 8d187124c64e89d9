"""
Engine constants: board geometry, marks, and display timing.

All fixed numbers used by the engine and its callers live here so that the
evaluator, the advisor, and the web/console shells agree on one layout.

Cells are indexed row-major:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------

BOARD_SIZE: int = 3
CELL_COUNT: int = BOARD_SIZE * BOARD_SIZE

# The 8 winning lines. Enumeration order matters: the evaluator reports the
# first completed line it finds, so rows come first, then columns, then the
# two diagonals.
LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)

# Cell groups in the advisor's positional preference order.
CENTER: int = 4
CORNERS: tuple[int, ...] = (0, 2, 6, 8)
SIDES: tuple[int, ...] = (1, 3, 5, 7)

# ---------------------------------------------------------------------------
# Marks
# ---------------------------------------------------------------------------

MARK_X: str = "X"
MARK_O: str = "O"
MARKS: tuple[str, str] = (MARK_X, MARK_O)

# ---------------------------------------------------------------------------
# Game modes
# ---------------------------------------------------------------------------

MODE_PVC: str = "pvc"  # human (X) against the computer (O)
MODE_PVP: str = "pvp"  # two humans sharing one board
MODES: tuple[str, str] = (MODE_PVC, MODE_PVP)

# ---------------------------------------------------------------------------
# Display timing (milliseconds)
# ---------------------------------------------------------------------------
# The browser waits before asking for the computer's move so the human sees
# their own mark land first, and waits briefly before bumping the score.

AI_MOVE_DELAY_MS: int = 450
SCORE_UPDATE_DELAY_MS: int = 150
