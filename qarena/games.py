from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TextIO

from .envs import Corridor, Maze, tictactoe_cohort
from .envs.base import Environment
from .observers import BoardRenderer, CorridorRenderer, MazeRenderer, Observer


@dataclass(frozen=True)
class GameSpec:
    name: str
    description: str
    cohort_factory: Callable[[], List[Environment]]
    renderer_factory: Callable[[Optional[TextIO]], Observer]


GAMES: Dict[str, GameSpec] = {
    "corridor": GameSpec(
        name="corridor",
        description="five-cell corridor, +100 at the right end",
        cohort_factory=lambda: [Corridor()],
        renderer_factory=CorridorRenderer,
    ),
    "maze": GameSpec(
        name="maze",
        description="grid maze from S to G, -1 per step",
        cohort_factory=lambda: [Maze()],
        renderer_factory=MazeRenderer,
    ),
    "tictactoe": GameSpec(
        name="tictactoe",
        description="two learning agents sharing one board",
        cohort_factory=tictactoe_cohort,
        renderer_factory=BoardRenderer,
    ),
}


def get_game(name: str) -> GameSpec:
    try:
        return GAMES[name]
    except KeyError:
        raise ValueError(f"Unknown game {name!r}; choose from {', '.join(GAMES)}") from None


__all__ = ["GameSpec", "GAMES", "get_game"]
