"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Snapshot defaults
# ============================================================================

REGION_DEFAULT: Final = "US"
SNAPSHOT_CACHE_TTL_SECONDS_DEFAULT: Final = 600
SNAPSHOT_CACHE_MAX_ENTRIES_DEFAULT: Final = 16

# ============================================================================
# Threshold defaults
# ============================================================================

MEMORY_IMBALANCE_RATIO_DEFAULT: Final = 2.0

# ============================================================================
# Runtime defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
DEMO_COUNTS_FALLBACK_DEFAULT: Final = False
CONFIG_PATH_DEFAULT: Final = "~/.config/kubesnap/settings.yaml"
CONFIG_PATH_ENV_VAR: Final = "KUBESNAP_CONFIG"

__all__ = [
    "CONFIG_PATH_DEFAULT",
    "CONFIG_PATH_ENV_VAR",
    "DEMO_COUNTS_FALLBACK_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "MEMORY_IMBALANCE_RATIO_DEFAULT",
    "REGION_DEFAULT",
    "SNAPSHOT_CACHE_MAX_ENTRIES_DEFAULT",
    "SNAPSHOT_CACHE_TTL_SECONDS_DEFAULT",
]
