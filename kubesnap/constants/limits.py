"""Limit and threshold constants.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Traversal limits
# ============================================================================

ITEMS_SEARCH_MAX_DEPTH: Final = 32

# ============================================================================
# Validation limits
# ============================================================================

MEMORY_IMBALANCE_RATIO_MIN: Final = 1.0
SNAPSHOT_CACHE_TTL_MIN: Final = 0
SNAPSHOT_CACHE_MAX_ENTRIES_MIN: Final = 1

# ============================================================================
# Score grade limits
# ============================================================================

SCORE_GOOD_MIN: Final = 80
SCORE_NEEDS_IMPROVEMENT_MIN: Final = 60

__all__ = [
    "ITEMS_SEARCH_MAX_DEPTH",
    "MEMORY_IMBALANCE_RATIO_MIN",
    "SCORE_GOOD_MIN",
    "SCORE_NEEDS_IMPROVEMENT_MIN",
    "SNAPSHOT_CACHE_MAX_ENTRIES_MIN",
    "SNAPSHOT_CACHE_TTL_MIN",
]
