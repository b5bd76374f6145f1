from __future__ import annotations

from typing import Dict, List, Sequence

from ..config import CORRIDOR_CELLS, CORRIDOR_START
from ..exceptions import InvalidActionError

LEFT = "left"
RIGHT = "right"
MOVES: Dict[str, int] = {LEFT: -1, RIGHT: 1}


class Corridor:
    """Five-cell corridor; the episode ends on reaching the last cell."""

    def __init__(self, cells: Sequence[int] = CORRIDOR_CELLS, start: int = CORRIDOR_START) -> None:
        self.cells = tuple(cells)
        self.index = start
        self.score = 0

    def legal_actions(self) -> List[str]:
        if self.index == len(self.cells) - 1:
            return []
        if self.index == 0:
            return [RIGHT]
        return [LEFT, RIGHT]

    def state_key(self) -> str:
        return str(self.index)

    def is_terminal(self) -> bool:
        return not self.legal_actions()

    def current_score(self) -> int:
        return self.score

    def apply(self, action: str) -> None:
        if action not in self.legal_actions():
            raise InvalidActionError(f"Action {action!r} is not legal at corridor cell {self.index}")
        self.index += MOVES[action]
        self.score += self.cells[self.index]


__all__ = ["Corridor", "LEFT", "RIGHT", "MOVES"]
