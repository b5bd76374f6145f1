"""Lock-step simulation of environment/agent pairs.

Each tick, every live pair observes, acts and is shown to the observers in
turn; once all pairs have moved, every pair whose outcome changed is
finished. The loop runs until every environment is terminal.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .agents.base import Agent
from .envs.base import Environment
from .exceptions import SimulationLimitError
from .observers import Observer

logger = logging.getLogger(__name__)


class Player:
    """An agent bound to its environment.

    Attributes:
        environment: The environment the agent plays in
        agent: The agent choosing moves
        moves: Number of actions applied so far
    """

    def __init__(self, environment: Environment, agent: Agent) -> None:
        self.environment = environment
        self.agent = agent
        self.moves = 0
        self._acted = False
        self._settled = False

    def step(self) -> bool:
        """Observe, act and apply one move. Returns False if the environment is terminal."""
        self._acted = False
        if self.environment.is_terminal():
            return False
        self.agent.observe(self.environment.state_key())
        action = self.agent.act(self.environment.legal_actions())
        self.environment.apply(action)
        self.moves += 1
        self._acted = True
        return True

    def complete(self) -> bool:
        """Report the outcome of the last move to the agent.

        An agent is finished after each tick it acted in, and once more when
        its environment turned terminal through another player's move. It is
        never finished twice at a terminal state, nor before its first move.
        """
        if self._settled or self.moves == 0:
            return False
        terminal = self.environment.is_terminal()
        if not self._acted and not terminal:
            return False
        self.agent.finish(self.environment.state_key(), self.environment.current_score())
        self._settled = terminal
        return True


class Simulation:
    """Runs a cohort of players until every environment is terminal."""

    def __init__(self, players: Sequence[Player], observers: Iterable[Observer] = ()) -> None:
        self.players: List[Player] = list(players)
        self.observers: List[Observer] = list(observers)
        self.ticks = 0

    def step(self) -> None:
        for player in self.players:
            player.step()
            for observer in self.observers:
                observer.notify(player.environment, player.agent)
        for player in self.players:
            player.complete()
        self.ticks += 1

    def ended(self) -> bool:
        return all(player.environment.is_terminal() for player in self.players)

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Step until every environment is terminal.

        Args:
            max_ticks: Optional safety limit; unlimited when None

        Returns:
            Number of ticks executed

        Raises:
            SimulationLimitError: If ``max_ticks`` ticks pass without ending
        """
        while not self.ended():
            if max_ticks is not None and self.ticks >= max_ticks:
                raise SimulationLimitError(f"Simulation did not end within {max_ticks} ticks")
            self.step()
        logger.debug("simulation ended after %d ticks", self.ticks)
        return self.ticks


__all__ = ["Player", "Simulation"]
