"""Learning agent backed by a SARSA(lambda) value table."""
from __future__ import annotations

import random
from typing import Mapping, Optional, Sequence

from ..models import Action, LearningParams, QMapping, StateAction, StateKey
from ..value_table import ValueTable


class LearningAgent:
    """Agent that adapts the agent protocol onto a ``ValueTable``.

    Attributes:
        table: The value table owned by this agent
    """

    def __init__(self, table: Optional[ValueTable] = None, name: str = "SARSA Agent"):
        self._name = name
        self.table = table or ValueTable()

    @classmethod
    def from_snapshot(
        cls,
        q: Optional[Mapping[StateAction, float]] = None,
        params: Optional[LearningParams] = None,
        rng: Optional[random.Random] = None,
        name: str = "SARSA Agent",
    ) -> "LearningAgent":
        """Build an agent whose table is seeded with a copy of ``q``."""
        return cls(ValueTable(params, q=q, rng=rng), name=name)

    @property
    def name(self) -> str:
        return self._name

    def reset(self) -> None:
        """Forget the last state, action and score; learned values and traces stay."""
        self.table.last_state = None
        self.table.last_action = None
        self.table.last_score = 0.0

    def observe(self, state: StateKey) -> None:
        self.table.last_state = state

    def act(self, actions: Sequence[Action]) -> Action:
        self.table.remember_actions(actions)
        chosen = self.table.select(actions).action
        self.table.last_action = chosen
        return chosen

    def finish(self, state: StateKey, score: float) -> None:
        delta_score = score - self.table.last_score
        self.table.update(delta_score, state)
        self.table.last_score = score

    def export_state(self) -> QMapping:
        return self.table.q


__all__ = ["LearningAgent"]
