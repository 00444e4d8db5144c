"""Constants module for kubesnap.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, payload keys)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from kubesnap.constants.defaults import (
    MEMORY_IMBALANCE_RATIO_DEFAULT,
    REGION_DEFAULT,
    SNAPSHOT_CACHE_TTL_SECONDS_DEFAULT,
)
from kubesnap.constants.enums import (
    OutputFormat,
    ResourceCategory,
    ResourceStatus,
    ScoreGrade,
    SearchMode,
)
from kubesnap.constants.limits import ITEMS_SEARCH_MAX_DEPTH
from kubesnap.constants.values import (
    APP_TITLE,
    TOTAL_RESOURCES_KEY,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Limits
    "ITEMS_SEARCH_MAX_DEPTH",
    # Defaults
    "MEMORY_IMBALANCE_RATIO_DEFAULT",
    "REGION_DEFAULT",
    "SNAPSHOT_CACHE_TTL_SECONDS_DEFAULT",
    "TOTAL_RESOURCES_KEY",
    # Enums
    "OutputFormat",
    "ResourceCategory",
    "ResourceStatus",
    "ScoreGrade",
    "SearchMode",
]
