"""Snapshot indexing, counting and loading."""

from kubesnap.controllers.snapshot.indexer import SnapshotIndex, SnapshotIndexer, index_snapshot
from kubesnap.controllers.snapshot.loader import SnapshotLoader
from kubesnap.controllers.snapshot.summarizer import (
    CountFallback,
    DemoCountFallback,
    counts_by_category,
    summarize_counts,
)

__all__ = [
    "CountFallback",
    "DemoCountFallback",
    "SnapshotIndex",
    "SnapshotIndexer",
    "SnapshotLoader",
    "counts_by_category",
    "index_snapshot",
    "summarize_counts",
]
