"""SQLAlchemy repositories implementing the application ports."""

from dashsearch.infrastructure.persistence.repositories.dashboard_search_repo import (
    DashboardSearchRepository,
)
from dashsearch.infrastructure.persistence.repositories.star_repo import StarRepository

__all__ = ["DashboardSearchRepository", "StarRepository"]
