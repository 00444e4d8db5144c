"""Search models."""

from kubesnap.models.search.match_record import MatchRecord, SearchResult
from kubesnap.models.search.search_query import SearchQuery

__all__ = ["MatchRecord", "SearchQuery", "SearchResult"]
