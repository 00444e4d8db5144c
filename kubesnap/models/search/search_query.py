"""Component search request model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from kubesnap.constants.enums import SearchMode


class SearchQuery(BaseModel):
    """One component search invocation.

    Selections keep the caller's order: matches are reported kind by kind in
    ``selected_resource_kinds`` order. Duplicate entries are dropped.
    """

    model_config = ConfigDict(frozen=True)

    selected_components: tuple[str, ...]
    selected_resource_kinds: tuple[str, ...]
    mode: SearchMode = SearchMode.INCLUDE

    @field_validator("selected_components", "selected_resource_kinds", mode="before")
    @classmethod
    def _dedupe(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return tuple(dict.fromkeys(value))
        return value


__all__ = ["SearchQuery"]
