"""Tic-Tac-Toe package exposing board rules, the heuristic AI, and the web API."""

from .ai import select_move
from .board import Outcome, empty_board, evaluate, is_full, winning_lines
from .controller import GameController
from .session import GameSession, new_session
from .ui import app

__all__ = [
    "GameController",
    "GameSession",
    "Outcome",
    "app",
    "empty_board",
    "evaluate",
    "is_full",
    "new_session",
    "select_move",
    "winning_lines",
]
