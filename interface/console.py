"""
Console protocol handler for playing the game in a terminal.

The protocol is line based: one command per line on stdin, one or more
response lines on stdout. Every response line is flushed immediately so the
handler can be driven by another program through a pipe.

Commands:
    new                 start a new round (scores kept)
    mode <pvc|pvp>      switch mode and start a new match
    play <0-8>          place the current mark; in pvc the computer replies
    board               print the board as three rows
    scores              print the scoreboard
    reset               clear the scoreboard and the board
    quit                exit

Responses:
    move <mark> <cell>  a mark was placed
    ignored <cell>      the move was not allowed (taken cell, round over)
    status <text>       status line after a move ("Turn: X", "Player O wins!")
    scores x=<n> o=<n> draws=<n>
    ok / mode <name>

Critical rule: stdout carries protocol responses only. Diagnostics go to
stderr through logging.
"""

import logging
import sys
from typing import Iterable

from engine.board import render
from engine.session import GameSession

_log = logging.getLogger(__name__)


def _send(line: str) -> None:
    """Write one protocol line to stdout and flush it."""
    print(line, flush=True)


class ConsoleHandler:
    """
    Stateful handler for the console protocol.

    Attributes:
        session: The game being played. One session lives for the whole
                 process, so scores accumulate across rounds.
    """

    def __init__(self, session: GameSession | None = None) -> None:
        self.session: GameSession = session if session is not None else GameSession()

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_new(self) -> None:
        self.session.new_match()
        _send("ok")

    def handle_mode(self, tokens: list[str]) -> None:
        """Switch between pvc and pvp. A missing or unknown mode raises ValueError."""
        if not tokens:
            raise ValueError("mode needs an argument: pvc or pvp")
        self.session.set_mode(tokens[0])
        _send(f"mode {self.session.mode}")

    def handle_play(self, tokens: list[str]) -> None:
        """
        Place the current side's mark, then let the computer answer.

        Args:
            tokens: tokens[0] is the cell index 0..8.
        """
        if not tokens:
            raise ValueError("play needs a cell index 0-8")
        index = int(tokens[0])
        mark = self.session.current_mark

        if not self.session.play(index):
            _send(f"ignored {index}")
            return
        _send(f"move {mark} {index}")

        if self.session.ai_thinking:
            reply = self.session.computer_move()
            if reply is not None:
                _send(f"move O {reply}")

        _send(f"status {self.session.status}")

    def handle_board(self) -> None:
        for row in render(self.session.board).splitlines():
            _send(row)

    def handle_scores(self) -> None:
        scores = self.session.scores
        _send(f"scores x={scores.x} o={scores.o} draws={scores.draws}")

    def handle_reset(self) -> None:
        self.session.reset_scores()
        _send("ok")

    def handle_quit(self) -> None:
        sys.exit(0)

    def dispatch(self, command: str, args: list[str]) -> None:
        if command == "new":
            self.handle_new()
        elif command == "mode":
            self.handle_mode(args)
        elif command == "play":
            self.handle_play(args)
        elif command == "board":
            self.handle_board()
        elif command == "scores":
            self.handle_scores()
        elif command == "reset":
            self.handle_reset()
        elif command == "quit":
            self.handle_quit()
        else:
            _log.warning("console: ignoring unknown command: %r", command)


def run_console_loop(lines: Iterable[str] | None = None) -> None:
    """
    Main console loop.

    Reads commands until "quit" or end of input. A failing command (bad
    index, unknown mode) is logged to stderr and the loop keeps reading.
    """
    handler = ConsoleHandler()

    for raw_line in lines if lines is not None else sys.stdin:
        line = raw_line.strip()
        if not line:
            continue

        tokens = line.split()
        try:
            handler.dispatch(tokens[0], tokens[1:])
        except ValueError as e:
            _log.error("console: error for command %r: %s", tokens[0], e)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    run_console_loop()
