"""Snapshot loader - reads snapshot files from disk with TTL caching."""

from __future__ import annotations

import gzip
import json
import logging
import zlib
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from kubesnap.constants.defaults import REGION_DEFAULT
from kubesnap.models.cache.snapshot_cache import SnapshotCache
from kubesnap.models.errors import SnapshotLoadError
from kubesnap.models.snapshot.snapshot import Snapshot, snapshot_cache_key
from kubesnap.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)

_GZIP_MAGIC = b"\x1f\x8b"
_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class SnapshotLoader:
    """Loads snapshot documents and caches them per ``{cluster}_{region}``.

    Latest snapshots are served from the cache while fresh. A request for a
    specific ``date`` always reads the file, stamps the snapshot with that
    date and never touches the cache.
    """

    def __init__(
        self,
        cache: SnapshotCache | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._cache = cache or SnapshotCache(
            ttl_seconds=self._settings.snapshot_cache_ttl_seconds,
            max_entries=self._settings.snapshot_cache_max_entries,
        )

    @property
    def cache(self) -> SnapshotCache:
        return self._cache

    def get_cached(self, cluster_id: str, region: str | None = None) -> Snapshot | None:
        """Return the fresh cached snapshot for a cluster, if any."""
        key = snapshot_cache_key(cluster_id, region or self._settings.default_region)
        cached = self._cache.get(key)
        if cached is None:
            return None
        snapshot, _captured_at = cached
        return snapshot

    def load_file(
        self,
        path: str | Path,
        cluster_id: str,
        region: str | None = None,
        date: str | None = None,
    ) -> Snapshot:
        """Load a snapshot file for ``cluster_id``.

        Args:
            path: JSON, gzip-compressed JSON, or YAML snapshot document.
            cluster_id: Cluster the snapshot belongs to.
            region: Cluster region; the configured default when omitted.
            date: ISO date or timestamp the file was captured at. When given,
                it becomes ``Snapshot.timestamp`` and the cache is bypassed.

        Returns:
            The loaded (or cached) snapshot.

        Raises:
            SnapshotLoadError: If the cluster id is missing or the file cannot
                be read or decoded, or ``date`` is not an ISO date.
        """
        if not cluster_id:
            raise SnapshotLoadError("Cluster ID is required to load a snapshot")
        captured_at = _parse_snapshot_date(date) if date is not None else None

        region = region or self._settings.default_region or REGION_DEFAULT
        key = snapshot_cache_key(cluster_id, region)

        if captured_at is None:
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug("Using cached snapshot for %s", key)
                return cached[0]

        payload = self.read_payload(path)
        if captured_at is None:
            snapshot = Snapshot(cluster_id=cluster_id, region=region, payload=payload)
        else:
            snapshot = Snapshot(
                cluster_id=cluster_id, region=region, timestamp=captured_at, payload=payload
            )
        logger.info("Loaded snapshot for %s from %s", key, path)

        if captured_at is None:
            self._cache.put(key, snapshot)
        return snapshot

    @classmethod
    def read_payload(cls, path: str | Path) -> dict[str, Any]:
        """Decode one JSON, gzip or YAML document into a mapping.

        Raises:
            SnapshotLoadError: If the file is unreadable, undecodable, or its
                top level is not a mapping.
        """
        file_path = Path(path)
        try:
            raw = file_path.read_bytes()
        except OSError as e:
            raise SnapshotLoadError(f"Cannot read {file_path}: {e}") from e

        if raw[:2] == _GZIP_MAGIC:
            try:
                raw = gzip.decompress(raw)
            except (OSError, EOFError, zlib.error) as e:
                raise SnapshotLoadError(f"Cannot decompress {file_path}: {e}") from e

        payload = cls._decode(raw, cls._is_yaml(file_path), file_path)
        if not isinstance(payload, dict):
            raise SnapshotLoadError(f"{file_path} must contain an object at the top level")
        return payload

    @staticmethod
    def _is_yaml(path: Path) -> bool:
        suffixes = [suffix.lower() for suffix in path.suffixes if suffix.lower() != ".gz"]
        return bool(suffixes) and suffixes[-1] in _YAML_SUFFIXES

    @staticmethod
    def _decode(raw: bytes, as_yaml: bool, path: Path) -> Any:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SnapshotLoadError(f"{path} is not UTF-8 text: {e}") from e

        if as_yaml:
            try:
                return yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise SnapshotLoadError(f"Invalid YAML in {path}: {e}") from e
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise SnapshotLoadError(f"Invalid JSON in {path}: {e}") from e


def _parse_snapshot_date(value: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise SnapshotLoadError(f"Invalid snapshot date: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = ["SnapshotLoader"]
