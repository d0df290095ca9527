"""Application layer: permission filter, interfaces, DTOs and use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from dashsearch.application.interfaces import (
    IDashboardSearchRepository,
    IStarRepository,
)
from dashsearch.application.permissions import FilterResult, PermissionFilter
from dashsearch.application.use_cases import SearchService

__all__ = [
    "FilterResult",
    "IDashboardSearchRepository",
    "IStarRepository",
    "PermissionFilter",
    "SearchService",
]
