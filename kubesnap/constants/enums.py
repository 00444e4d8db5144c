"""All enum definitions for kubesnap.

This module consolidates all enumerations used throughout the package.
"""

from enum import Enum

# =============================================================================
# Search Enums
# =============================================================================

class SearchMode(Enum):
    """Component search semantics."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


# =============================================================================
# Catalog Enums
# =============================================================================

class ResourceCategory(Enum):
    """Browsing sections used to group resource kinds."""

    CLUSTER = "cluster"
    WORKLOADS = "workloads"
    AUTOSCALING = "autoscaling"
    NETWORKING = "networking"
    STORAGE = "storage"
    CONFIGURATION = "configuration"
    SECURITY = "security"


# =============================================================================
# Status Enums
# =============================================================================

class ResourceStatus(Enum):
    """Derived status labels for controller-managed workloads."""

    READY = "Ready"
    PROGRESSING = "Progressing"
    NOT_READY = "Not Ready"
    COMPLETED = "Completed"
    RUNNING = "Running"
    FAILED = "Failed"
    PENDING = "Pending"
    UNKNOWN = "Unknown"


class ScoreGrade(Enum):
    """Best-practices score grades."""

    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"
    POOR = "Poor"


# =============================================================================
# Output Enums
# =============================================================================

class OutputFormat(Enum):
    """Output formats for command-line rendering."""

    TABLE = "table"
    MARKDOWN = "markdown"
    JSON = "json"


__all__ = [
    "OutputFormat",
    "ResourceCategory",
    "ResourceStatus",
    "ScoreGrade",
    "SearchMode",
]
