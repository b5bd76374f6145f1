"""Base agent interface and protocol definitions.

This module defines the Agent protocol that every decision-maker driven by
the simulation loop must follow.
"""
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from ..models import Action, StateKey


@runtime_checkable
class Agent(Protocol):
    """Protocol defining the agent interface.

    The simulation loop calls ``observe`` and ``act`` while an environment is
    live, and ``finish`` once the outcome of the agent's move is known.
    """

    @property
    def name(self) -> str:
        """Get the display name of this agent."""
        ...

    def reset(self) -> None:
        """Clear per-episode bookkeeping before a new episode."""
        ...

    def observe(self, state: StateKey) -> None:
        """Record the current state of the environment."""
        ...

    def act(self, actions: Sequence[Action]) -> Action:
        """Choose one of the legal ``actions``.

        Raises:
            NoLegalActionsError: If ``actions`` is empty
        """
        ...

    def finish(self, state: StateKey, score: float) -> None:
        """Receive the state reached and the cumulative score after a move."""
        ...

    def export_state(self) -> Any:
        """Return the learned state worth persisting (``None`` if nothing)."""
        ...


__all__ = ["Agent"]
