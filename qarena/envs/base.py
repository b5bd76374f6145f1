"""Environment protocol shared by every game the simulation loop can drive."""
from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from ..models import Action, StateKey


@runtime_checkable
class Environment(Protocol):
    """Capability contract for a turn-based environment.

    ``legal_actions`` is empty exactly when ``is_terminal`` is true, and
    ``current_score`` is cumulative over the episode.
    """

    def legal_actions(self) -> List[Action]:
        ...

    def state_key(self) -> StateKey:
        ...

    def is_terminal(self) -> bool:
        ...

    def current_score(self) -> float:
        ...

    def apply(self, action: Action) -> None:
        """Mutate the environment by ``action``.

        Raises:
            InvalidActionError: If the action is illegal or the environment is terminal
        """
        ...


__all__ = ["Environment"]
