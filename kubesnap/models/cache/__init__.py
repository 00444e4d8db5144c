"""Cache models."""

from kubesnap.models.cache.snapshot_cache import SnapshotCache

__all__ = ["SnapshotCache"]
