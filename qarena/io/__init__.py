from __future__ import annotations

from .snapshot_yaml import load_snapshots, save_snapshots, snapshot_from_document, snapshot_to_document

__all__ = ["load_snapshots", "save_snapshots", "snapshot_from_document", "snapshot_to_document"]
