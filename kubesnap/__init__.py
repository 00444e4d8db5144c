"""kubesnap - Kubernetes snapshot browsing and component search.

Public entry points: ``index_snapshot``, ``summarize_counts``,
``filter_resources``, ``search`` and ``aggregate``.
"""

from kubesnap.controllers.browse.filter_engine import ResourceFilter, filter_resources
from kubesnap.controllers.reports.aggregator import aggregate
from kubesnap.controllers.search.engine import search
from kubesnap.controllers.snapshot.indexer import SnapshotIndex, index_snapshot
from kubesnap.controllers.snapshot.summarizer import summarize_counts
from kubesnap.models.errors import (
    InvalidQueryError,
    KubeSnapError,
    ReportFormatError,
    SnapshotLoadError,
    UnsupportedKindError,
)
from kubesnap.models.search.search_query import SearchQuery

__version__ = "0.1.0"

__all__ = [
    "InvalidQueryError",
    "KubeSnapError",
    "ReportFormatError",
    "ResourceFilter",
    "SearchQuery",
    "SnapshotIndex",
    "SnapshotLoadError",
    "UnsupportedKindError",
    "aggregate",
    "filter_resources",
    "index_snapshot",
    "search",
    "summarize_counts",
]
