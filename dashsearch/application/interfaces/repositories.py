"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dashsearch.application.dtos.search import FindDashboardsQuery, HitList


class IDashboardSearchRepository(Protocol):
    """Protocol for the dashboard search store (DIP)."""

    async def find_dashboards(self, query: FindDashboardsQuery) -> HitList:
        """Return hits matching the query's filters and embedded permission filter."""


class IStarRepository(Protocol):
    """Protocol for starred dashboards (DIP)."""

    async def get_by_user(self, user_id: int) -> set[int]:
        """Return ids of dashboards the user has starred."""
