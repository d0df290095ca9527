"""Composition root: builds the search service from a session and settings.

Repositories use SQLAlchemy; the service only sees the application ports.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from dashsearch.application.use_cases.search import SearchService
from dashsearch.core.config import Settings, get_settings
from dashsearch.infrastructure.persistence.repositories import (
    DashboardSearchRepository,
    StarRepository,
)
from dashsearch.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def build_search_service(
    session: AsyncSession, settings: Settings | None = None
) -> SearchService:
    """Return a SearchService wired to SQLAlchemy repositories on session."""
    settings = settings or get_settings()
    logger.debug(
        "Building search service: nested_folders=%s recursive_queries=%s",
        settings.nested_folders_enabled,
        settings.database_supports_recursive_queries,
    )
    return SearchService(
        dashboard_repo=DashboardSearchRepository(
            session,
            default_limit=settings.search_default_limit,
            max_limit=settings.search_max_limit,
            app_sub_url=settings.app_sub_url,
        ),
        star_repo=StarRepository(session),
        nested_folders_enabled=settings.nested_folders_enabled,
        recursive_queries_supported=settings.database_supports_recursive_queries,
        max_nested_folder_depth=settings.max_nested_folder_depth,
    )
