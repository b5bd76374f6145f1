"""Non-learning agents: a random mover and a greedy policy replayer."""
from __future__ import annotations

import random
from typing import Mapping, Optional, Sequence

from ..exceptions import NoLegalActionsError
from ..models import Action, LearningParams, QMapping, StateAction, StateKey
from ..value_table import ValueTable


class RandomAgent:
    """Agent picking a uniformly random legal action.

    Attributes:
        last_state: Most recently observed state
        last_score: Score reported by the last ``finish``
    """

    def __init__(self, name: str = "Random Agent", seed: Optional[int] = None):
        self._name = name
        self._rng = random.Random(seed)
        self.last_state: Optional[StateKey] = None
        self.last_score: float = 0.0

    @property
    def name(self) -> str:
        return self._name

    def reset(self) -> None:
        self.last_state = None
        self.last_score = 0.0

    def observe(self, state: StateKey) -> None:
        self.last_state = state

    def act(self, actions: Sequence[Action]) -> Action:
        if not actions:
            raise NoLegalActionsError("Cannot select an action from an empty candidate set")
        return self._rng.choice(list(actions))

    def finish(self, state: StateKey, score: float) -> None:
        self.last_state = state
        self.last_score = score

    def export_state(self) -> None:
        return None


class GreedyAgent:
    """Agent that replays a learned value mapping without updating it.

    Selection always exploits (``epsilon = 0``), so replay is deterministic.
    """

    def __init__(self, q: Optional[Mapping[StateAction, float]] = None, name: str = "Greedy Agent"):
        self._name = name
        self.table = ValueTable(LearningParams(epsilon=0.0), q=q)

    @property
    def name(self) -> str:
        return self._name

    def reset(self) -> None:
        self.table.last_state = None
        self.table.last_action = None

    def observe(self, state: StateKey) -> None:
        self.table.last_state = state

    def act(self, actions: Sequence[Action]) -> Action:
        chosen = self.table.select(actions).action
        self.table.last_action = chosen
        return chosen

    def finish(self, state: StateKey, score: float) -> None:
        self.table.last_score = score

    def export_state(self) -> QMapping:
        return self.table.q


__all__ = ["RandomAgent", "GreedyAgent"]
