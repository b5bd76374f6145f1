from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping

import yaml

from ..exceptions import SnapshotError, SnapshotLoadError
from ..models import QMapping, StateAction

logger = logging.getLogger(__name__)

SnapshotCohort = Dict[int, QMapping]

# Keys must come back from ``yaml.safe_load`` as hashable scalars.
_SCALAR_KEYS = (str, int, float, bool)


def _check_key(slot: int, kind: str, key: Any) -> None:
    if not isinstance(key, _SCALAR_KEYS):
        raise SnapshotError(f"Cannot save {kind} {key!r} in slot {slot}: snapshot keys must be YAML scalars")


def snapshot_to_document(snapshots: Mapping[int, Mapping[StateAction, float]]) -> Dict[int, Dict[Any, Dict[Any, float]]]:
    """Nest each slot's values as ``state -> action -> value``.

    Raises:
        SnapshotError: If a state or action is not a str, int, float or bool
    """
    document: Dict[int, Dict[Any, Dict[Any, float]]] = {}
    for slot in sorted(snapshots):
        states: Dict[Any, Dict[Any, float]] = {}
        for (state, action), value in snapshots[slot].items():
            _check_key(slot, "state", state)
            _check_key(slot, "action", action)
            states.setdefault(state, {})[action] = float(value)
        document[int(slot)] = states
    return document


def snapshot_from_document(data: Any) -> SnapshotCohort:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SnapshotLoadError("Snapshot document must be a mapping of slot -> states")
    snapshots: SnapshotCohort = {}
    for slot, states in data.items():
        if not isinstance(slot, int):
            raise SnapshotLoadError(f"Snapshot slot must be an integer, got {slot!r}")
        if states is None:
            states = {}
        if not isinstance(states, dict):
            raise SnapshotLoadError(f"Slot {slot} must map states to actions")
        q: QMapping = {}
        for state, actions in states.items():
            if not isinstance(actions, dict):
                raise SnapshotLoadError(f"State {state!r} in slot {slot} must map actions to values")
            for action, value in actions.items():
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise SnapshotLoadError(f"Value for {state!r}/{action!r} in slot {slot} is not numeric: {value!r}")
                q[StateAction(state, action)] = float(value)
        snapshots[slot] = q
    return snapshots


def save_snapshots(path: str, snapshots: Mapping[int, Mapping[StateAction, float]]) -> None:
    """Write ``snapshots`` to ``path``, replacing any previous file atomically.

    The document is dumped to ``path + ".tmp"`` first, so an earlier
    checkpoint survives a failed or interrupted save.
    """
    document = snapshot_to_document(snapshots)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    tmp = path + ".tmp"
    try:
        with open(tmp, "w", encoding="utf-8") as handle:
            yaml.safe_dump(document, handle, sort_keys=False)
    except yaml.YAMLError as exc:
        os.remove(tmp)
        raise SnapshotError(f"Cannot serialize snapshot to {path}: {exc}") from exc
    os.replace(tmp, path)
    logger.info("saved %d snapshot slot(s) to %s", len(document), path)


def load_snapshots(path: str) -> SnapshotCohort:
    if not os.path.isfile(path):
        raise SnapshotLoadError(f"Snapshot file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise SnapshotLoadError(f"Invalid snapshot YAML in {path}: {exc}") from exc
    snapshots = snapshot_from_document(data)
    logger.info("loaded %d snapshot slot(s) from %s", len(snapshots), path)
    return snapshots


__all__ = [
    "SnapshotCohort",
    "snapshot_to_document",
    "snapshot_from_document",
    "save_snapshots",
    "load_snapshots",
]
