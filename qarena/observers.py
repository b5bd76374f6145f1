"""Observers notified by the simulation loop after every player's move.

Observers only read the environment and agent they are handed; renderers
print to a stream, ``ScoreCounter`` keeps running totals.
"""
from __future__ import annotations

import sys
from typing import Any, Dict, Optional, Protocol, TextIO, runtime_checkable

from .envs.corridor import Corridor
from .envs.maze import Maze
from .envs.tictactoe import TicTacToe
from .pretty import pretty_board, pretty_corridor, pretty_corridor_policy, pretty_maze


@runtime_checkable
class Observer(Protocol):
    def notify(self, environment: Any, agent: Any) -> None:
        ...


class _Renderer:
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout

    def _emit(self, text: str) -> None:
        print(text, file=self.stream)


class CorridorRenderer(_Renderer):
    """Prints the walker's position and, for learning agents, the greedy policy."""

    def notify(self, environment: Corridor, agent: Any) -> None:
        table = getattr(agent, "table", None)
        last_action = table.last_action if table is not None else None
        self._emit(pretty_corridor(environment, last_action))
        if table is not None:
            self._emit(pretty_corridor_policy(table, len(environment.cells)))


class MazeRenderer(_Renderer):
    def notify(self, environment: Maze, agent: Any) -> None:
        self._emit(pretty_maze(environment, getattr(agent, "table", None)))


class BoardRenderer(_Renderer):
    """Prints the shared board once per move; the idle side's notification is skipped."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__(stream)
        self._last: Optional[str] = None

    def notify(self, environment: TicTacToe, agent: Any) -> None:
        key = environment.state_key()
        if key == self._last:
            return
        self._last = key
        self._emit(f"{getattr(agent, 'name', 'agent')} ({environment.mark})")
        self._emit(pretty_board(environment.board))


class ScoreCounter:
    """Counts notifications and remembers the latest score per environment.

    Attributes:
        notifications: Total number of ``notify`` calls
        scores: Latest cumulative score keyed by environment identity
    """

    def __init__(self) -> None:
        self.notifications = 0
        self.scores: Dict[int, float] = {}

    def notify(self, environment: Any, agent: Any) -> None:
        self.notifications += 1
        self.scores[id(environment)] = environment.current_score()

    def reset(self) -> None:
        self.notifications = 0
        self.scores.clear()


__all__ = ["Observer", "CorridorRenderer", "MazeRenderer", "BoardRenderer", "ScoreCounter"]
