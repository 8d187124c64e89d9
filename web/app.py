"""
FastAPI web application for the Tic-Tac-Toe game.

Exposes REST endpoints: POST /api/evaluate classifies a board, POST
/api/move asks the computer player for its next cell, and GET /api/config
hands the display delays to the page. Serves the browser frontend (board, mode switch, score badges) via static files.

Architecture notes:
- Sync endpoints (not async): the engine is pure CPU work with no I/O, and
  FastAPI runs sync handlers in a thread pool.
- Static files mounted LAST: route registration is first-match, so API routes
  must be registered before the StaticFiles mount.
- Stateless per request: the browser keeps the board, turn, mode and scores
  and sends the full board each time; no server-side game state exists.
"""

import logging
import random
from pathlib import Path
from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, field_validator, model_validator

from engine.board import InvalidBoardError, Outcome, place
from engine.constants import (
    AI_MOVE_DELAY_MS,
    CELL_COUNT,
    MARK_O,
    MARK_X,
    MARKS,
    MODES,
    SCORE_UPDATE_DELAY_MS,
)
from engine.evaluate import evaluate
from engine.search import explain_move

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

_VERSION = "1.0.0"

# Absolute path resolved at import time, independent of the working directory.
_STATIC_DIR = Path(__file__).parent / "static"

app = FastAPI(title="Tic Tac Toe", version=_VERSION)

Mark = Literal["X", "O"]


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class BoardRequest(BaseModel):
    """
    A board sent by the browser.

    Fields:
        board: 9 cells in row-major order, each "X", "O" or null.
    """

    board: list[Mark | None]

    @field_validator("board")
    @classmethod
    def check_length(cls, v: list[str | None]) -> list[str | None]:
        """Reject boards that are not exactly 9 cells."""
        if len(v) != CELL_COUNT:
            raise ValueError(f"board must have exactly {CELL_COUNT} cells, got {len(v)}")
        return v


class MoveRequest(BoardRequest):
    """
    Client request for the computer's move.

    Fields:
        ai:    Mark the computer plays (default "O").
        human: Mark the opponent plays (default "X").
        seed:  Optional seed for the corner/side tie-break, for reproducible
               replies. Omit it for normal play.
    """

    ai: Mark = MARK_O
    human: Mark = MARK_X
    seed: int | None = None

    @model_validator(mode="after")
    def distinct_marks(self) -> "MoveRequest":
        if self.ai == self.human:
            raise ValueError("ai and human must play different marks")
        return self


class OutcomeResponse(BaseModel):
    """
    Evaluation of a board.

    Fields:
        status: "in_progress", "win" or "draw".
        winner: Winning mark, or null.
        line:   Indices of the winning line, empty unless status is "win".
    """

    status: str
    winner: str | None = None
    line: list[int] = []

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> "OutcomeResponse":
        return cls(
            status=outcome.status.value,
            winner=outcome.winner,
            line=list(outcome.line or ()),
        )


class MoveResponse(BaseModel):
    """
    The computer's reply.

    Fields:
        move:    Chosen cell index, or null when no move is available.
        rule:    Advisor rule that picked the move ("win", "block", ...).
        board:   Board after the move is applied.
        outcome: Evaluation of that board.
    """

    move: int | None
    rule: str | None
    board: list[str | None]
    outcome: OutcomeResponse


class ConfigResponse(BaseModel):
    """
    Frontend settings.

    Fields:
        ai_move_delay_ms:      Pause before the computer move is requested.
        score_update_delay_ms: Pause before a decided round is scored.
        modes:                 Selectable game modes.
        marks:                 The two marks, first mover first.
    """

    ai_move_delay_ms: int
    score_update_delay_ms: int
    modes: list[str]
    marks: list[str]


# ---------------------------------------------------------------------------
# API routes (registered BEFORE StaticFiles mount)
# ---------------------------------------------------------------------------


@app.get("/api/health")
def api_health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok", "version": _VERSION}


@app.get("/api/config", response_model=ConfigResponse)
def api_config() -> ConfigResponse:
    """Display settings the browser reads once at startup."""
    return ConfigResponse(
        ai_move_delay_ms=AI_MOVE_DELAY_MS,
        score_update_delay_ms=SCORE_UPDATE_DELAY_MS,
        modes=list(MODES),
        marks=list(MARKS),
    )


@app.post("/api/evaluate", response_model=OutcomeResponse)
def api_evaluate(request: BoardRequest) -> OutcomeResponse:
    """
    Classify a board as a win, a draw, or in progress.

    Raises:
        HTTPException 400: the board breaks an engine precondition.
    """
    try:
        outcome = evaluate(request.board)
    except InvalidBoardError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid board: {exc}") from exc
    return OutcomeResponse.from_outcome(outcome)


@app.post("/api/move", response_model=MoveResponse)
def api_move(request: MoveRequest) -> MoveResponse:
    """
    Compute the computer's move for the given board.

    Confirms the round is still open, runs the advisor, applies the move and
    returns the new board with its evaluation. A full board yields
    move=null rather than an error.

    Raises:
        HTTPException 400: invalid board or round already decided.
        HTTPException 500: the advisor failed unexpectedly.
    """
    try:
        outcome = evaluate(request.board)
    except InvalidBoardError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid board: {exc}") from exc

    if outcome.winner is not None:
        raise HTTPException(
            status_code=400,
            detail=f"Round is already over: {outcome.winner} won",
        )

    rng = random.Random(request.seed) if request.seed is not None else None

    try:
        choice = explain_move(request.board, request.ai, request.human, rng)
    except Exception as exc:
        _log.exception("Advisor failed for board=%s", request.board)
        raise HTTPException(status_code=500, detail=f"Engine error: {exc}") from exc

    if choice is None:
        return MoveResponse(
            move=None,
            rule=None,
            board=list(request.board),
            outcome=OutcomeResponse.from_outcome(outcome),
        )

    board = place(request.board, choice.index, request.ai)
    _log.info("Move=%d rule=%s ai=%s", choice.index, choice.rule.value, request.ai)

    return MoveResponse(
        move=choice.index,
        rule=choice.rule.value,
        board=board,
        outcome=OutcomeResponse.from_outcome(evaluate(board)),
    )


@app.get("/", include_in_schema=False)
def serve_root() -> FileResponse:
    """Serve the game page."""
    return FileResponse(_STATIC_DIR / "index.html")


# ---------------------------------------------------------------------------
# Static file mount: MUST be last (catch-all for /static/* assets)
# ---------------------------------------------------------------------------

app.mount("/static", StaticFiles(directory=_STATIC_DIR), name="static")
