"""Pytest configuration and shared fixtures for qarena tests."""
from __future__ import annotations

import random
from typing import Callable, List, Optional, Sequence

import pytest

from qarena import config
from qarena.models import LearningParams
from qarena.value_table import ValueTable


class ScriptedAgent:
    """Agent that plays scripted moves, then a preferred action, then the first legal one.

    Every call is appended to ``log`` as ``(name, event, payload)``.
    """

    def __init__(
        self,
        name: str = "scripted",
        moves: Optional[Sequence] = None,
        prefer=None,
        log: Optional[list] = None,
    ) -> None:
        self._name = name
        self.moves = list(moves or [])
        self.prefer = prefer
        self.log = log if log is not None else []
        self.finished: List[tuple] = []

    @property
    def name(self) -> str:
        return self._name

    def reset(self) -> None:
        pass

    def observe(self, state) -> None:
        self.log.append((self._name, "observe", state))

    def act(self, actions):
        if self.moves:
            action = self.moves.pop(0)
        elif self.prefer in actions:
            action = self.prefer
        else:
            action = actions[0]
        self.log.append((self._name, "act", action))
        return action

    def finish(self, state, score) -> None:
        self.finished.append((state, score))
        self.log.append((self._name, "finish", state))

    def export_state(self):
        return None


class NeverRaisingRandom(random.Random):
    """Random source that fails the test if exploration ever draws from it."""

    def random(self) -> float:
        raise AssertionError("random source consulted with epsilon = 0")

    def choice(self, seq):
        raise AssertionError("random source consulted with epsilon = 0")


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Plain output keeps rendered text comparable."""
    monkeypatch.setattr(config, "USE_COLOR", False)


@pytest.fixture
def greedy_params() -> LearningParams:
    """Never explore; alpha 0.5, gamma 0.9, lambda 0.5."""
    return LearningParams(epsilon=0.0, learning_rate=0.5, discount_rate=0.9, trace_decay=0.5)


@pytest.fixture
def table(greedy_params: LearningParams) -> ValueTable:
    return ValueTable(greedy_params, rng=NeverRaisingRandom())


@pytest.fixture
def scripted_agent() -> Callable[..., ScriptedAgent]:
    """Factory for ScriptedAgent instances."""
    return ScriptedAgent
