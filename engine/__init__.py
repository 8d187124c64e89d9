"""
Tic-Tac-Toe engine package.

This package implements the game rules and the computer opponent. Every
function here is pure except GameSession, which holds one player's game.

Modules:
    constants - Board geometry, winning lines, marks, modes, display delays
    board     - Board helpers, Outcome type and precondition errors
    evaluate  - Win/draw/in-progress classification of a board
    search    - Greedy rule-ordered move advisor (the computer player)
    session   - Turn alternation, modes and scoreboard for one game
"""
