"""SQLAlchemy ORM models. Importing this package registers all tables on Base.metadata."""

from dashsearch.infrastructure.persistence.models.dashboard import (
    Dashboard,
    DashboardTag,
    Folder,
)
from dashsearch.infrastructure.persistence.models.star import Star

__all__ = ["Dashboard", "DashboardTag", "Folder", "Star"]
