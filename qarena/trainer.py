"""Multi-episode training with value-table snapshots carried between episodes."""
from __future__ import annotations

import logging
import random
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import numpy as np

from .agents.learning import LearningAgent
from .agents.simple import GreedyAgent
from .envs.base import Environment
from .io.snapshot_yaml import SnapshotCohort, load_snapshots, save_snapshots
from .models import EpisodeResult, LearningParams, TraceScope
from .observers import Observer
from .simulation import Player, Simulation

logger = logging.getLogger(__name__)

CohortFactory = Callable[[], Sequence[Environment]]


class Trainer:
    """Runs episodes for a cohort of learning agents and keeps their value tables.

    Slot ``i`` of the snapshot cohort belongs to the ``i``-th environment the
    cohort factory returns. Each episode seeds its agents with a copy of the
    slot's snapshot and copies the learned values back afterwards.

    Attributes:
        snapshots: Learned value mapping per cohort slot
        episodes: Number of episodes run so far
    """

    def __init__(
        self,
        cohort_factory: CohortFactory,
        params: Optional[LearningParams] = None,
        *,
        seed: Optional[int] = None,
        observers: Iterable[Observer] = (),
        trace_scope: TraceScope = TraceScope.EPISODE,
        max_ticks: Optional[int] = None,
    ) -> None:
        """Initialize the trainer.

        Args:
            cohort_factory: Callable returning a fresh list of environments
            params: Learning hyperparameters shared by every agent
            seed: Seed for the agents' random sources
            observers: Observers notified during every episode
            trace_scope: Whether eligibility traces live for one episode or
                for the trainer's whole lifetime
            max_ticks: Optional per-episode tick limit
        """
        self.cohort_factory = cohort_factory
        self.params = params or LearningParams()
        self.observers: List[Observer] = list(observers)
        self.trace_scope = trace_scope
        self.max_ticks = max_ticks
        self.snapshots: SnapshotCohort = {}
        self.episodes = 0
        self._rng = random.Random(seed)
        self._agents: Dict[int, LearningAgent] = {}

    def _agent_for(self, slot: int) -> LearningAgent:
        if self.trace_scope is TraceScope.TRAINER and slot in self._agents:
            agent = self._agents[slot]
            agent.reset()
            return agent
        agent = LearningAgent.from_snapshot(
            self.snapshots.get(slot),
            params=self.params,
            rng=random.Random(self._rng.randrange(1 << 30)),
            name=f"SARSA Agent {slot}",
        )
        if self.trace_scope is TraceScope.TRAINER:
            self._agents[slot] = agent
        return agent

    def step(self, observers: Optional[Iterable[Observer]] = None) -> EpisodeResult:
        """Run one episode and store every agent's learned values."""
        environments = list(self.cohort_factory())
        players = [Player(environment, self._agent_for(slot)) for slot, environment in enumerate(environments)]
        watchers = self.observers if observers is None else list(observers)
        ticks = Simulation(players, watchers).run(max_ticks=self.max_ticks)
        for slot, player in enumerate(players):
            self.snapshots[slot] = dict(player.agent.export_state())
        self.episodes += 1
        result = EpisodeResult(
            episode=self.episodes,
            ticks=ticks,
            scores=[float(environment.current_score()) for environment in environments],
        )
        logger.debug("episode %d: ticks=%d scores=%s", result.episode, result.ticks, result.scores)
        return result

    def train(
        self,
        episodes: int,
        *,
        checkpoint_path: Optional[str] = None,
        checkpoint_every: int = 0,
    ) -> List[EpisodeResult]:
        results: List[EpisodeResult] = []
        for _ in range(episodes):
            results.append(self.step())
            if checkpoint_path and checkpoint_every > 0 and self.episodes % checkpoint_every == 0:
                self.save(checkpoint_path)
                logger.info("checkpoint at episode %d -> %s", self.episodes, checkpoint_path)
        return results

    def save(self, path: str) -> None:
        save_snapshots(path, self.snapshots)

    def load(self, path: str) -> None:
        """Replace the snapshot cohort with the one stored at ``path``.

        Agents kept alive for ``TraceScope.TRAINER`` are dropped.

        Raises:
            SnapshotLoadError: If the file is missing or malformed
        """
        self.snapshots = load_snapshots(path)
        self._agents.clear()

    def greedy_agents(self) -> List[GreedyAgent]:
        """A non-learning greedy agent per stored slot, in slot order."""
        return [GreedyAgent(self.snapshots[slot], name=f"Greedy Agent {slot}") for slot in sorted(self.snapshots)]


def summarize(results: Sequence[EpisodeResult]) -> Dict[str, float]:
    """Mean/min/max of every slot's final score and the mean episode length."""
    if not results:
        return {"episodes": 0, "mean_score": 0.0, "min_score": 0.0, "max_score": 0.0, "mean_ticks": 0.0}
    scores = np.asarray([result.scores for result in results], dtype=np.float64)
    ticks = np.asarray([result.ticks for result in results], dtype=np.float64)
    return {
        "episodes": len(results),
        "mean_score": float(scores.mean()),
        "min_score": float(scores.min()),
        "max_score": float(scores.max()),
        "mean_ticks": float(ticks.mean()),
    }


__all__ = ["Trainer", "CohortFactory", "summarize"]
