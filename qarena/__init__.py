from __future__ import annotations

from . import config
from .agents import Agent, GreedyAgent, LearningAgent, RandomAgent
from .games import GAMES, get_game
from .models import EpisodeResult, LearningParams, Selection, StateAction, TraceScope
from .simulation import Player, Simulation
from .trainer import Trainer, summarize
from .value_table import ValueTable

__all__ = [
    "config",
    "Agent",
    "GreedyAgent",
    "LearningAgent",
    "RandomAgent",
    "GAMES",
    "get_game",
    "EpisodeResult",
    "LearningParams",
    "Selection",
    "StateAction",
    "TraceScope",
    "Player",
    "Simulation",
    "Trainer",
    "summarize",
    "ValueTable",
]
