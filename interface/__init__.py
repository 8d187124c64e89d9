"""
Interface package: text front ends for the game engine.

Modules:
    console - Line-oriented command protocol for playing in a terminal.
              Reads commands from stdin, writes responses to stdout.
              Can be run as a module: python -m interface.console
"""
