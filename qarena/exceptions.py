"""Custom exceptions for the qarena package.

This module defines a hierarchy of exceptions for the error conditions that
can occur while configuring, simulating, learning and persisting snapshots.
"""
from __future__ import annotations


class QArenaError(Exception):
    """Base exception for all qarena errors."""
    pass


class ConfigurationError(QArenaError, ValueError):
    """Raised when learning parameters or an environment layout are invalid."""
    pass


class InvalidActionError(QArenaError):
    """Raised when an action is invalid for the current environment state."""
    pass


class AgentError(QArenaError):
    """Base exception for agent-related errors."""
    pass


class NoLegalActionsError(AgentError):
    """Raised when an action is requested from an empty candidate set."""
    pass


class InvalidAgentStateError(AgentError):
    """Raised when an agent is in an invalid state for the requested operation."""
    pass


class SimulationLimitError(QArenaError):
    """Raised when a simulation exceeds its configured tick limit."""
    pass


class SnapshotError(QArenaError):
    """Base exception for snapshot persistence errors."""
    pass


class SnapshotLoadError(SnapshotError):
    """Raised when a snapshot cannot be loaded from disk."""
    pass


__all__ = [
    "QArenaError",
    "ConfigurationError",
    "InvalidActionError",
    "AgentError",
    "NoLegalActionsError",
    "InvalidAgentStateError",
    "SimulationLimitError",
    "SnapshotError",
    "SnapshotLoadError",
]
