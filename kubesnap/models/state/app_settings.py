"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubesnap.constants.defaults import (
    DEMO_COUNTS_FALLBACK_DEFAULT,
    LOG_LEVEL_DEFAULT,
    MEMORY_IMBALANCE_RATIO_DEFAULT,
    REGION_DEFAULT,
    SNAPSHOT_CACHE_MAX_ENTRIES_DEFAULT,
    SNAPSHOT_CACHE_TTL_SECONDS_DEFAULT,
)
from kubesnap.constants.limits import (
    MEMORY_IMBALANCE_RATIO_MIN,
    SNAPSHOT_CACHE_MAX_ENTRIES_MIN,
    SNAPSHOT_CACHE_TTL_MIN,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Snapshot loading
    default_region: str = REGION_DEFAULT
    snapshot_cache_ttl_seconds: int = Field(
        default=SNAPSHOT_CACHE_TTL_SECONDS_DEFAULT, ge=SNAPSHOT_CACHE_TTL_MIN
    )
    snapshot_cache_max_entries: int = Field(
        default=SNAPSHOT_CACHE_MAX_ENTRIES_DEFAULT, ge=SNAPSHOT_CACHE_MAX_ENTRIES_MIN
    )

    # Search thresholds
    memory_imbalance_ratio: float = Field(
        default=MEMORY_IMBALANCE_RATIO_DEFAULT, ge=MEMORY_IMBALANCE_RATIO_MIN
    )

    # Development mode: synthetic counts when a snapshot is empty
    demo_counts_fallback: bool = DEMO_COUNTS_FALLBACK_DEFAULT

    log_level: str = LOG_LEVEL_DEFAULT

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
