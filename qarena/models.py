from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, List, NamedTuple

from .config import DISCOUNT_RATE, EXPLORATION_RATE, LEARNING_RATE, TRACE_DECAY
from .exceptions import ConfigurationError

StateKey = Hashable
Action = Hashable


class StateAction(NamedTuple):
    state: StateKey
    action: Action


class Selection(NamedTuple):
    action: Action
    value: float


QMapping = Dict[StateAction, float]


@dataclass(frozen=True)
class LearningParams:
    epsilon: float = EXPLORATION_RATE
    learning_rate: float = LEARNING_RATE
    discount_rate: float = DISCOUNT_RATE
    trace_decay: float = TRACE_DECAY

    def __post_init__(self) -> None:
        for label in ("epsilon", "discount_rate", "trace_decay"):
            value = getattr(self, label)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{label} must lie in [0, 1], got {value!r}")
        if self.learning_rate <= 0.0:
            raise ConfigurationError(f"learning_rate must be positive, got {self.learning_rate!r}")

    @property
    def trace_factor(self) -> float:
        """Per-step multiplier applied to every eligibility trace."""
        return self.discount_rate * self.trace_decay


class TraceScope(Enum):
    EPISODE = "episode"
    TRAINER = "trainer"


@dataclass
class EpisodeResult:
    episode: int
    ticks: int
    scores: List[float] = field(default_factory=list)


__all__ = [
    "StateKey",
    "Action",
    "StateAction",
    "Selection",
    "QMapping",
    "LearningParams",
    "TraceScope",
    "EpisodeResult",
]
