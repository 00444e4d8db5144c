"""Snapshot indexer - normalizes raw snapshot payloads into per-kind resource lists."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from kubesnap.constants.values import PAYLOAD_DATA_KEY, PAYLOAD_SUMMARY_KEY
from kubesnap.models.core.resource import Resource
from kubesnap.models.core.resource_kind import (
    RESOURCE_KINDS,
    RESOURCE_KINDS_BY_ID,
    get_kind_spec,
    supported_kinds,
)
from kubesnap.models.snapshot.snapshot import Snapshot
from kubesnap.utils.tree import (
    TreeNodeKind,
    as_mapping,
    find_items,
    node_kind,
)

logger = logging.getLogger(__name__)


class SnapshotIndex:
    """Read-only ``kind -> resources`` view of one snapshot.

    Every catalog kind is present; kinds missing from the payload map to an
    empty tuple. ``summary_counts`` holds pre-aggregated counts for payloads
    that ship counts without resource bodies.
    """

    __slots__ = ("_resources", "_summary_counts")

    def __init__(
        self,
        resources: Mapping[str, Sequence[Resource]] | None = None,
        summary_counts: Mapping[str, int] | None = None,
    ) -> None:
        resources = resources or {}
        summary_counts = summary_counts or {}
        for kind in list(resources) + list(summary_counts):
            get_kind_spec(kind)
        self._resources: dict[str, tuple[Resource, ...]] = {
            kind: tuple(resources.get(kind, ())) for kind in supported_kinds()
        }
        self._summary_counts: dict[str, int] = {
            kind: int(summary_counts[kind]) for kind in supported_kinds() if kind in summary_counts
        }

    def resources_of(self, kind: str) -> tuple[Resource, ...]:
        """Return the resources of ``kind`` in payload order.

        Raises:
            UnsupportedKindError: If ``kind`` is not part of the catalog.
        """
        get_kind_spec(kind)
        return self._resources[kind]

    def summary_count(self, kind: str) -> int | None:
        """Return the pre-aggregated count for ``kind``, if the payload had one."""
        get_kind_spec(kind)
        return self._summary_counts.get(kind)

    def count_of(self, kind: str) -> int:
        """Resource list length when populated, else the pre-aggregated count, else 0."""
        resources = self.resources_of(kind)
        if resources:
            return len(resources)
        return self._summary_counts.get(kind, 0)

    def kinds(self) -> tuple[str, ...]:
        """Kinds that have at least one resource body, in catalog order."""
        return tuple(kind for kind, resources in self._resources.items() if resources)

    def namespaces(self) -> list[str]:
        """Namespace names for filter menus.

        Taken from the namespace list when it is populated, otherwise from
        the namespaces seen on namespaced resources.
        """
        names = {resource.name for resource in self._resources["namespaces"] if resource.name}
        if not names:
            names = {
                resource.namespace
                for resources in self._resources.values()
                for resource in resources
                if resource.namespace
            }
        return sorted(names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SnapshotIndex):
            return NotImplemented
        return (
            self._resources == other._resources
            and self._summary_counts == other._summary_counts
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        populated = {kind: len(resources) for kind, resources in self._resources.items() if resources}
        return f"SnapshotIndex(resources={populated}, summary_counts={self._summary_counts})"


class SnapshotIndexer:
    """Extracts resource lists from raw snapshot payloads.

    Accepted payload shapes:
    - ``{"data": {"podList": ...}}`` (collector output)
    - ``{"podList": ...}`` (the ``data`` section on its own)
    - ``{"resource_summary": {"Pods": 3}}`` (counts only)

    Each raw list key may hold a bare array, an object with an ``items``
    array, or an object that nests an ``items`` array arbitrarily deep.
    Malformed or missing sections index as empty.
    """

    _RAW_KEYS = frozenset(spec.raw_key for spec in RESOURCE_KINDS)

    @classmethod
    def index(cls, raw_payload: Any) -> SnapshotIndex:
        """Build a ``SnapshotIndex`` without mutating ``raw_payload``."""
        if isinstance(raw_payload, Snapshot):
            raw_payload = raw_payload.payload

        data_section = cls._data_section(raw_payload)
        resources: dict[str, list[Resource]] = {}
        for spec in RESOURCE_KINDS:
            items = cls._extract_items(data_section.get(spec.raw_key))
            resources[spec.kind] = cls._to_resources(spec.kind, items)
            if resources[spec.kind]:
                logger.debug("Indexed %d %s", len(resources[spec.kind]), spec.kind)

        summary_counts = cls._summary_counts(as_mapping(raw_payload).get(PAYLOAD_SUMMARY_KEY))

        index = SnapshotIndex(resources, summary_counts)
        logger.info(
            "Indexed snapshot: %d kinds with resources, %d pre-aggregated counts",
            len(index.kinds()),
            len(summary_counts),
        )
        return index

    @classmethod
    def _data_section(cls, raw_payload: Any) -> dict[str, Any]:
        """Return the mapping that holds the ``<kind>List`` keys."""
        payload = as_mapping(raw_payload)
        data = payload.get(PAYLOAD_DATA_KEY)
        if node_kind(data) is TreeNodeKind.MAPPING:
            return dict(data)
        if cls._RAW_KEYS.intersection(payload):
            return payload
        return {}

    @staticmethod
    def _extract_items(raw_value: Any) -> list[Any]:
        """Locate the resource array inside one raw list section."""
        kind = node_kind(raw_value)
        if kind is TreeNodeKind.SEQUENCE:
            return list(raw_value)
        if kind is TreeNodeKind.MAPPING:
            return find_items(raw_value) or []
        return []

    @staticmethod
    def _to_resources(kind: str, items: list[Any]) -> list[Resource]:
        resources: list[Resource] = []
        for item in items:
            if node_kind(item) is not TreeNodeKind.MAPPING:
                logger.debug("Skipping non-object %s entry: %r", kind, type(item).__name__)
                continue
            resources.append(Resource.from_raw(kind, item))
        return resources

    @staticmethod
    def _summary_counts(raw_summary: Any) -> dict[str, int]:
        """Read ``resource_summary`` counts for catalog kinds."""
        counts: dict[str, int] = {}
        for key, value in as_mapping(raw_summary).items():
            kind = str(key).lower()
            if kind not in RESOURCE_KINDS_BY_ID:
                logger.debug("Ignoring summary count for unsupported kind %r", key)
                continue
            if isinstance(value, bool):
                continue
            try:
                counts[kind] = max(0, int(value or 0))
            except (TypeError, ValueError, OverflowError):
                logger.debug("Ignoring non-numeric summary count for %s: %r", kind, value)
        return counts


def index_snapshot(raw_payload: Any) -> SnapshotIndex:
    """Normalize a raw snapshot payload (or ``Snapshot``) into a ``SnapshotIndex``."""
    return SnapshotIndexer.index(raw_payload)


__all__ = ["SnapshotIndex", "SnapshotIndexer", "index_snapshot"]
