"""
Gobblet Game Engine

Core game logic for the Gobblet stacking game.
This module contains no GUI dependencies.
"""

from engine.gobblet import GameEngine, GamePhase, GameSnapshot, MoveResult
from engine.board import Board
from engine.reserve import ReservePool
from engine.rules import StackingRules, WinResult
from engine.lines import LINES, line_cells

__all__ = [
    "GameEngine",
    "GamePhase",
    "GameSnapshot",
    "MoveResult",
    "Board",
    "ReservePool",
    "StackingRules",
    "WinResult",
    "LINES",
    "line_cells",
]
