#!/usr/bin/env python3
"""
Arena: play the computer advisor against a uniformly random opponent.

Run before and after any change to the advisor rules to check the computer
still never loses a meaningful share of games. Games are seeded, so two runs
with the same seed play identical games and the tables are comparable.

Usage: python3 tools/arena.py [games] [seed]
"""
import os
import random
import sys
from typing import Callable

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO not in sys.path:
    sys.path.insert(0, REPO)

from engine.board import Board, Status, empty_cells, new_board, place
from engine.constants import MARK_O, MARK_X
from engine.evaluate import evaluate
from engine.search import choose_move

# A player takes (board, own mark, opponent mark, rng) and returns a cell.
Player = Callable[[Board, str, str, random.Random], int]


def advisor_player(board: Board, mark: str, opponent: str, rng: random.Random) -> int:
    move = choose_move(board, mark, opponent, rng)
    if move is None:
        raise RuntimeError("advisor asked to move on a full board")
    return move


def random_player(board: Board, mark: str, opponent: str, rng: random.Random) -> int:
    return rng.choice(empty_cells(board))


def play_game(first: Player, second: Player, rng: random.Random) -> str | None:
    """Play one game, first as X. Returns the winning mark or None for a draw."""
    board = new_board()
    players = ((first, MARK_X, MARK_O), (second, MARK_O, MARK_X))
    turn = 0
    while True:
        player, mark, opponent = players[turn % 2]
        board = place(board, player(board, mark, opponent, rng), mark)
        outcome = evaluate(board)
        if outcome.status is Status.WIN:
            return outcome.winner
        if outcome.status is Status.DRAW:
            return None
        turn += 1


def run_arena(games: int, seed: int = 0) -> dict[str, dict[str, int]]:
    """
    Play `games` games with the advisor moving first and `games` with it
    moving second.

    Returns:
        {"advisor first": {...}, "advisor second": {...}}, each a tally with
        keys: wins, draws, losses (from the advisor's side).
    """
    rng = random.Random(seed)
    results = {}
    for label, advisor_first in (("advisor first", True), ("advisor second", False)):
        tally = {"wins": 0, "draws": 0, "losses": 0}
        advisor_mark = MARK_X if advisor_first else MARK_O
        for _ in range(games):
            if advisor_first:
                winner = play_game(advisor_player, random_player, rng)
            else:
                winner = play_game(random_player, advisor_player, rng)
            if winner is None:
                tally["draws"] += 1
            elif winner == advisor_mark:
                tally["wins"] += 1
            else:
                tally["losses"] += 1
        results[label] = tally
    return results


def main() -> None:
    """Run the arena and print a summary table."""
    games = int(sys.argv[1]) if len(sys.argv) > 1 else 500
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else 0

    print(f"Tic-Tac-Toe advisor arena: {games} games per side, seed {seed}")
    print()
    print(f"{'Side':<16} {'Wins':>6} {'Draws':>6} {'Losses':>7} {'Win %':>6}")
    print("-" * 45)
    for label, tally in run_arena(games, seed).items():
        win_pct = 100 * tally["wins"] // max(1, games)
        print(
            f"{label:<16} {tally['wins']:>6} {tally['draws']:>6} "
            f"{tally['losses']:>7} {win_pct:>5}%"
        )


if __name__ == "__main__":
    main()
