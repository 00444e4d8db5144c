"""Snapshot container model."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kubesnap.constants.defaults import REGION_DEFAULT


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Snapshot(BaseModel):
    """Point-in-time capture of one cluster.

    ``payload`` is the decoded raw document exactly as the collector produced
    it; use ``index_snapshot`` to get at its resources.
    """

    model_config = ConfigDict(frozen=True)

    cluster_id: str
    region: str = REGION_DEFAULT
    timestamp: datetime = Field(default_factory=_utc_now)
    payload: dict[str, Any] = Field(default_factory=dict, repr=False)

    @property
    def cache_key(self) -> str:
        return snapshot_cache_key(self.cluster_id, self.region)


def snapshot_cache_key(cluster_id: str, region: str = REGION_DEFAULT) -> str:
    """Build the ``{cluster}_{region}`` key snapshots are cached under."""
    return f"{cluster_id}_{region}"


__all__ = ["Snapshot", "snapshot_cache_key"]
