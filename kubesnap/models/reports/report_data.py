"""Component usage report models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ReportCell(BaseModel):
    """Usage of one component across one resource kind."""

    model_config = ConfigDict(frozen=True)

    resource_kind: str
    component_key: str
    count_present: int
    total_resources_of_kind: int

    @property
    def percentage(self) -> int:
        return usage_percentage(self.count_present, self.total_resources_of_kind)


def usage_percentage(count: int, total: int) -> int:
    """Return ``count`` as a rounded percentage of ``total``; 0 for an empty kind."""
    if total <= 0:
        return 0
    # Round half up, as the usage table always has.
    return int(count * 100 / total + 0.5)


__all__ = ["ReportCell", "usage_percentage"]
