"""Controllers module for kubesnap.

This module provides the snapshot pipeline: indexing raw snapshot payloads,
counting and filtering resources, component search and usage reporting.
"""

from __future__ import annotations

# Browse domain
from kubesnap.controllers.browse import ResourceFilter, classify_status, filter_resources

# Reports domain
from kubesnap.controllers.reports import (
    aggregate,
    read_best_practices,
    read_node_pods,
    report_cells,
    score_grade,
)

# Search domain
from kubesnap.controllers.search import ComponentSearchEngine, search

# Snapshot domain
from kubesnap.controllers.snapshot import (
    DemoCountFallback,
    SnapshotIndex,
    SnapshotLoader,
    index_snapshot,
    summarize_counts,
)

__all__ = [
    # Search
    "ComponentSearchEngine",
    # Snapshot
    "DemoCountFallback",
    # Browse
    "ResourceFilter",
    "SnapshotIndex",
    "SnapshotLoader",
    # Reports
    "aggregate",
    "classify_status",
    "filter_resources",
    "index_snapshot",
    "read_best_practices",
    "read_node_pods",
    "report_cells",
    "score_grade",
    "search",
    "summarize_counts",
]
