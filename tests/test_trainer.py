"""Tests for multi-episode training, trace scopes and checkpointing."""
from __future__ import annotations

import os

import pytest

from qarena.agents import GreedyAgent
from qarena.envs import Corridor, tictactoe_cohort
from qarena.models import EpisodeResult, LearningParams, StateAction, TraceScope
from qarena.trainer import Trainer, summarize


class FirstSight:
    """Captures each episode's agent and a copy of its table at the first notification."""

    def __init__(self) -> None:
        self.agents = []
        self.q = []
        self.trajectories = []
        self.scores = []
        self._seen = []

    def notify(self, environment, agent) -> None:
        if any(seen is environment for seen in self._seen):
            return
        self._seen.append(environment)
        self.agents.append(agent)
        self.q.append(dict(agent.table.q))
        self.trajectories.append(agent.table.trajectory)
        self.scores.append(agent.table.last_score)


def corridor_trainer(greedy_params, **kwargs) -> Trainer:
    return Trainer(lambda: [Corridor()], greedy_params, max_ticks=10_000, **kwargs)


class TestStep:
    def test_step_stores_a_copy_of_learned_values(self, greedy_params):
        watcher = FirstSight()
        trainer = corridor_trainer(greedy_params, observers=[watcher])

        result = trainer.step()

        assert isinstance(result, EpisodeResult)
        assert result.episode == 1
        assert result.ticks >= 2
        assert len(result.scores) == 1
        assert trainer.snapshots[0]
        assert trainer.snapshots[0] is not watcher.agents[0].export_state()
        assert trainer.snapshots[0] == watcher.agents[0].export_state()

    def test_next_episode_is_seeded_from_snapshot(self, greedy_params):
        watcher = FirstSight()
        trainer = corridor_trainer(greedy_params, observers=[watcher])

        trainer.step()
        saved = dict(trainer.snapshots[0])
        trainer.step()

        # The first update of an episode happens after the first notification.
        assert watcher.q[1] == saved

    def test_step_observers_override(self, greedy_params):
        watcher = FirstSight()
        other = FirstSight()
        trainer = corridor_trainer(greedy_params, observers=[watcher])
        trainer.step(observers=[other])
        assert watcher.agents == []
        assert len(other.agents) == 1


class TestTraceScope:
    def test_episode_scope_starts_every_episode_fresh(self, greedy_params):
        watcher = FirstSight()
        trainer = corridor_trainer(greedy_params, observers=[watcher])
        trainer.train(3)

        assert len({id(agent) for agent in watcher.agents}) == 3
        assert watcher.trajectories == [(), (), ()]

    def test_trainer_scope_keeps_traces_alive(self, greedy_params):
        watcher = FirstSight()
        trainer = corridor_trainer(greedy_params, observers=[watcher], trace_scope=TraceScope.TRAINER)
        trainer.train(3)

        assert len({id(agent) for agent in watcher.agents}) == 1
        assert watcher.trajectories[0] == ()
        assert watcher.trajectories[1]
        # Score bookkeeping restarts with every environment.
        assert watcher.scores == [0.0, 0.0, 0.0]

    def test_load_drops_kept_agents(self, greedy_params, tmp_path):
        watcher = FirstSight()
        trainer = corridor_trainer(greedy_params, observers=[watcher], trace_scope=TraceScope.TRAINER)
        trainer.step()
        path = str(tmp_path / "snap.yaml")
        trainer.save(path)
        trainer.load(path)
        trainer.step()

        assert watcher.agents[0] is not watcher.agents[1]
        assert watcher.trajectories[1] == ()


class TestPersistence:
    def test_checkpoints_during_training(self, greedy_params, tmp_path):
        path = str(tmp_path / "ckpt.yaml")
        trainer = corridor_trainer(greedy_params)
        trainer.train(4, checkpoint_path=path, checkpoint_every=2)

        assert os.path.isfile(path)
        restored = corridor_trainer(greedy_params)
        restored.load(path)
        assert restored.snapshots == trainer.snapshots

    def test_round_trip_matches_in_memory_training(self, greedy_params, tmp_path):
        """
        Given: A trained snapshot saved to disk
        When: A fresh trainer loads it and both keep training identically
        Then: Both end with the same values
        """
        path = str(tmp_path / "snap.yaml")
        original = corridor_trainer(greedy_params)
        original.train(5)
        original.save(path)

        resumed = corridor_trainer(greedy_params)
        resumed.load(path)

        original.train(3)
        resumed.train(3)

        assert set(resumed.snapshots[0]) == set(original.snapshots[0])
        for key, value in original.snapshots[0].items():
            assert resumed.snapshots[0][key] == pytest.approx(value)


class TestCohorts:
    def test_tictactoe_trains_both_slots(self):
        trainer = Trainer(tictactoe_cohort, LearningParams(epsilon=0.2), seed=7, max_ticks=10)
        results = trainer.train(20)

        assert sorted(trainer.snapshots) == [0, 1]
        for result in results:
            assert 3 <= result.ticks <= 5
            assert result.scores[0] == -result.scores[1]
        for key in trainer.snapshots[0]:
            assert isinstance(key.state, str) and len(key.state) == 9
            assert isinstance(key.action, int)

    def test_seeded_trainers_are_reproducible(self):
        def run(seed):
            trainer = Trainer(tictactoe_cohort, LearningParams(epsilon=0.3), seed=seed)
            trainer.train(10)
            return trainer.snapshots

        assert run(3) == run(3)

    def test_greedy_agents_per_slot(self):
        trainer = Trainer(tictactoe_cohort, LearningParams(epsilon=0.5), seed=1)
        trainer.train(2)
        agents = trainer.greedy_agents()
        assert len(agents) == 2
        assert all(isinstance(agent, GreedyAgent) for agent in agents)
        assert agents[1].export_state() == trainer.snapshots[1]


def test_summarize():
    results = [EpisodeResult(1, 2, [90.0]), EpisodeResult(2, 4, [-10.0])]
    stats = summarize(results)
    assert stats["episodes"] == 2
    assert stats["mean_score"] == pytest.approx(40.0)
    assert stats["min_score"] == -10.0
    assert stats["max_score"] == 90.0
    assert stats["mean_ticks"] == pytest.approx(3.0)
    assert summarize([])["episodes"] == 0


def test_snapshot_keys_are_structural(greedy_params):
    trainer = corridor_trainer(greedy_params)
    trainer.step()
    assert all(isinstance(key, StateAction) for key in trainer.snapshots[0])
