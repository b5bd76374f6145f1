"""Tabular action-value estimator trained with SARSA(lambda).

The table maps ``(state, action)`` pairs to learned values and eligibility
traces. Missing pairs read as zero and are never inserted by a lookup.
"""
from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .exceptions import InvalidAgentStateError, NoLegalActionsError
from .models import Action, LearningParams, QMapping, Selection, StateAction, StateKey

logger = logging.getLogger(__name__)


class ValueTable:
    """Action-value table with accumulating eligibility traces.

    Attributes:
        params: Learning hyperparameters
        last_state: State most recently observed by the owning agent
        last_action: Action most recently chosen by the owning agent
        last_score: Cumulative score recorded after the last update
    """

    def __init__(
        self,
        params: Optional[LearningParams] = None,
        q: Optional[Mapping[StateAction, float]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize the table.

        Args:
            params: Learning hyperparameters (defaults from ``config``)
            q: Previously learned values to seed the table with; copied
            rng: Random source used for exploration
        """
        self.params = params or LearningParams()
        self._q: QMapping = {StateAction(*key): float(value) for key, value in (q or {}).items()}
        self._e: QMapping = {}
        # Every visit is kept, revisits included.
        self._trajectory: List[StateAction] = []
        self._available: Dict[Action, None] = {}
        self._rng = rng or random.Random()
        self.last_state: Optional[StateKey] = None
        self.last_action: Optional[Action] = None
        self.last_score: float = 0.0

    @property
    def q(self) -> QMapping:
        """The live value mapping (not a copy)."""
        return self._q

    @property
    def trajectory(self) -> Tuple[StateAction, ...]:
        return tuple(self._trajectory)

    @property
    def available_actions(self) -> List[Action]:
        return list(self._available)

    def remember_actions(self, actions: Iterable[Action]) -> None:
        for action in actions:
            self._available.setdefault(action, None)

    def value(self, state: StateKey, action: Action) -> float:
        return self._q.get(StateAction(state, action), 0.0)

    def eligibility(self, state: StateKey, action: Action) -> float:
        return self._e.get(StateAction(state, action), 0.0)

    def action_values(self, actions: Iterable[Action], state: Optional[StateKey] = None) -> List[Selection]:
        """Rank candidate actions by value, best first.

        The sort is stable, so tied actions keep their candidate order.
        """
        if state is None:
            state = self.last_state
        ranked = [Selection(action, self.value(state, action)) for action in actions]
        ranked.sort(key=lambda selection: -selection.value)
        return ranked

    def select(self, actions: Iterable[Action], state: Optional[StateKey] = None) -> Selection:
        """Pick an action epsilon-greedily.

        Args:
            actions: Candidate actions, in priority order for ties
            state: State to evaluate against (defaults to ``last_state``)

        Returns:
            The chosen action together with its current value

        Raises:
            NoLegalActionsError: If ``actions`` is empty
        """
        candidates = list(actions)
        if not candidates:
            raise NoLegalActionsError("Cannot select an action from an empty candidate set")
        if state is None:
            state = self.last_state
        if self.params.epsilon > 0.0 and self._rng.random() < self.params.epsilon:
            action = self._rng.choice(candidates)
            return Selection(action, self.value(state, action))
        return self.action_values(candidates, state)[0]

    def update(self, delta_score: float, new_state: StateKey) -> float:
        """Apply one backward-view SARSA(lambda) step.

        The lookahead action is selected over every action the table has
        ever been offered, evaluated at ``new_state``, rather than over the
        successor's own legal actions. A pair recorded several times in the
        trajectory is credited and decayed once per recorded visit.

        Args:
            delta_score: Score gained by the last action
            new_state: State reached after the last action

        Returns:
            The temporal-difference error of this step

        Raises:
            InvalidAgentStateError: If no action has been recorded yet
        """
        if self.last_action is None:
            raise InvalidAgentStateError("Cannot update the policy before an action was taken")
        pair = StateAction(self.last_state, self.last_action)
        self._trajectory.append(pair)

        lookahead = self.select(self._available, state=new_state)
        params = self.params
        delta = delta_score + params.discount_rate * lookahead.value - self.value(*pair)
        self._e[pair] = self.eligibility(*pair) + 1.0

        step = params.learning_rate * delta
        decay = params.trace_factor
        for visited in self._trajectory:
            trace = self._e.get(visited, 0.0)
            self._q[visited] = self._q.get(visited, 0.0) + step * trace
            self._e[visited] = decay * trace
        logger.debug("update %s -> %r: delta=%.4f", pair, new_state, delta)
        return delta


__all__ = ["ValueTable"]
