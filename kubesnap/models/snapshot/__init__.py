"""Snapshot models."""

from kubesnap.models.snapshot.snapshot import Snapshot, snapshot_cache_key

__all__ = ["Snapshot", "snapshot_cache_key"]
