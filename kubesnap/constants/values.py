"""Scalar constants for kubesnap.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "kubesnap"

# ============================================================================
# Snapshot payload keys
# ============================================================================

PAYLOAD_DATA_KEY: Final = "data"
PAYLOAD_SUMMARY_KEY: Final = "resource_summary"
PAYLOAD_ITEMS_KEY: Final = "items"

# ============================================================================
# Display values
# ============================================================================

TOTAL_RESOURCES_KEY: Final = "total_resources"
NOT_AVAILABLE: Final = "N/A"

# ============================================================================
# Status markup (rich text display)
# ============================================================================

STATUS_STYLE_OK: Final = "green"
STATUS_STYLE_WARN: Final = "yellow"
STATUS_STYLE_ERROR: Final = "red"
STATUS_STYLE_NEUTRAL: Final = "dim"

__all__ = [
    "APP_TITLE",
    "NOT_AVAILABLE",
    "PAYLOAD_DATA_KEY",
    "PAYLOAD_ITEMS_KEY",
    "PAYLOAD_SUMMARY_KEY",
    "STATUS_STYLE_ERROR",
    "STATUS_STYLE_NEUTRAL",
    "STATUS_STYLE_OK",
    "STATUS_STYLE_WARN",
    "TOTAL_RESOURCES_KEY",
]
