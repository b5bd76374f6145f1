from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import MAZE_GOAL_SCORE, MAZE_LAYOUT, MAZE_STEP_SCORE
from ..exceptions import ConfigurationError, InvalidActionError

Cell = Tuple[int, int]

WALL = "#"
START = "S"
GOAL = "G"

# Order matters: it is the tie-break order for untrained agents.
MOVES: Dict[str, Cell] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


def _find(rows: Sequence[str], marker: str) -> Cell:
    found = [(r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == marker]
    if len(found) != 1:
        raise ConfigurationError(f"Maze layout must contain exactly one {marker!r}, found {len(found)}")
    return found[0]


class Maze:
    """Grid maze walked from ``S`` to ``G``.

    Entering a floor cell costs ``step_score``; entering the goal scores
    ``goal_score`` and ends the episode. Cells outside the layout count as walls.
    """

    def __init__(
        self,
        layout: Sequence[str] = MAZE_LAYOUT,
        step_score: int = MAZE_STEP_SCORE,
        goal_score: int = MAZE_GOAL_SCORE,
    ) -> None:
        self.rows = tuple(layout)
        self.start = _find(self.rows, START)
        self.goal = _find(self.rows, GOAL)
        self.step_score = step_score
        self.goal_score = goal_score
        self.position: Cell = self.start
        self.score = 0
        self.moves = 0

    def is_open(self, cell: Cell) -> bool:
        r, c = cell
        if r < 0 or r >= len(self.rows) or c < 0 or c >= len(self.rows[r]):
            return False
        return self.rows[r][c] != WALL

    def _target(self, cell: Cell, action: str) -> Cell:
        dr, dc = MOVES[action]
        return cell[0] + dr, cell[1] + dc

    def _open_moves(self, cell: Cell) -> List[str]:
        return [action for action in MOVES if self.is_open(self._target(cell, action))]

    def legal_actions(self) -> List[str]:
        if self.is_terminal():
            return []
        return self._open_moves(self.position)

    def state_key(self) -> str:
        return f"{self.position[0]},{self.position[1]}"

    def is_terminal(self) -> bool:
        return self.position == self.goal

    def current_score(self) -> int:
        return self.score

    def apply(self, action: str) -> None:
        if action not in self.legal_actions():
            raise InvalidActionError(f"Action {action!r} is not legal at maze cell {self.state_key()}")
        self.position = self._target(self.position, action)
        self.score += self.goal_score if self.position == self.goal else self.step_score
        self.moves += 1

    def shortest_path_length(self) -> Optional[int]:
        """Minimum number of moves from start to goal, or None if unreachable."""
        distances = {self.start: 0}
        queue = deque([self.start])
        while queue:
            cell = queue.popleft()
            if cell == self.goal:
                return distances[cell]
            for action in self._open_moves(cell):
                target = self._target(cell, action)
                if target not in distances:
                    distances[target] = distances[cell] + 1
                    queue.append(target)
        return None


__all__ = ["Maze", "MOVES", "WALL", "START", "GOAL"]
