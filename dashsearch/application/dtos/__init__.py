"""Application DTOs: search requests, hits and sort options."""

from dashsearch.application.dtos.search import (
    SORT_ALPHA_ASC,
    SORT_ALPHA_DESC,
    FindDashboardsQuery,
    Hit,
    HitList,
    SearchQuery,
    SortOption,
)

__all__ = [
    "SORT_ALPHA_ASC",
    "SORT_ALPHA_DESC",
    "FindDashboardsQuery",
    "Hit",
    "HitList",
    "SearchQuery",
    "SortOption",
]
