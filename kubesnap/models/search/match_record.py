"""Component search result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field

from kubesnap.constants.enums import SearchMode


class MatchRecord(BaseModel):
    """One resource matched by a component search."""

    model_config = ConfigDict(frozen=True)

    kind: str
    namespace: str | None = None
    name: str
    matched_components: tuple[str, ...] = ()
    has_memory_imbalance: bool = False


class SearchResult(BaseModel):
    """Matches plus summary counts for one search."""

    model_config = ConfigDict(frozen=True)

    matches: tuple[MatchRecord, ...] = ()
    total_resources: int = 0
    mode: SearchMode = SearchMode.INCLUDE
    selected_components: tuple[str, ...] = ()
    selected_resource_kinds: tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def match_count(self) -> int:
        return len(self.matches)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def imbalance_count(self) -> int:
        return sum(1 for match in self.matches if match.has_memory_imbalance)


__all__ = ["MatchRecord", "SearchResult"]
