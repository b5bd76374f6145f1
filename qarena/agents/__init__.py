"""Agent implementations for the qarena package.

This package provides the agent types the simulation loop can drive:
- Agent: Protocol defining the agent interface
- LearningAgent: Agent learning through a SARSA(lambda) value table
- RandomAgent: Agent choosing uniformly random moves
- GreedyAgent: Agent replaying a learned value mapping without learning

All agents implement the Agent protocol and can be used interchangeably.
"""
from __future__ import annotations

from .base import Agent
from .learning import LearningAgent
from .simple import GreedyAgent, RandomAgent

__all__ = [
    "Agent",
    "LearningAgent",
    "RandomAgent",
    "GreedyAgent",
]
