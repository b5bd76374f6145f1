"""Environments the simulation loop can drive.

- Environment: Protocol every game satisfies
- Corridor: five-cell corridor with a rewarding right end
- Maze: grid maze walked from start to goal
- TicTacToe: one player's view of a shared tic-tac-toe board
"""
from __future__ import annotations

from .base import Environment
from .corridor import Corridor
from .maze import Maze
from .tictactoe import Board, TicTacToe, tictactoe_cohort

__all__ = [
    "Environment",
    "Corridor",
    "Maze",
    "Board",
    "TicTacToe",
    "tictactoe_cohort",
]
