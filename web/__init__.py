"""
Web application package for the Tic-Tac-Toe game.

Provides a FastAPI-based REST API and a plain HTML/JS frontend for playing
in a browser. Run locally with: uvicorn web.app:app --reload
"""
