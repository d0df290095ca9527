"""Dashboard search use case.

Builds the permission filter for the signed-in user, delegates to the
dashboard search repository, then applies starred flags, the default
ordering and the starred-only filter.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dashsearch.application.dtos.search import (
    SORT_ALPHA_ASC,
    SORT_ALPHA_DESC,
    FindDashboardsQuery,
    HitList,
    SearchQuery,
    SortOption,
)
from dashsearch.application.permissions.filter import PermissionFilter
from dashsearch.shared.telemetry.tracing import add_span_attributes, add_span_event, traced

if TYPE_CHECKING:
    from dashsearch.application.interfaces.repositories import (
        IDashboardSearchRepository,
        IStarRepository,
    )

logger = logging.getLogger(__name__)


class SearchService:
    """Permission-aware dashboard and folder search.

    Collaborator errors (star lookup, repository) propagate unchanged;
    no partial result is returned.
    """

    def __init__(
        self,
        dashboard_repo: "IDashboardSearchRepository",
        star_repo: "IStarRepository",
        nested_folders_enabled: bool = False,
        recursive_queries_supported: bool = True,
        max_nested_folder_depth: int = 8,
        sort_options: list[SortOption] | None = None,
    ) -> None:
        self.dashboard_repo = dashboard_repo
        self.star_repo = star_repo
        self.nested_folders_enabled = nested_folders_enabled
        self.recursive_queries_supported = recursive_queries_supported
        self.max_nested_folder_depth = max_nested_folder_depth
        options = sort_options or [SORT_ALPHA_ASC, SORT_ALPHA_DESC]
        self._sort_options = {option.name: option for option in options}

    def sort_options(self) -> list[SortOption]:
        """Return registered sort options ordered by index, then name."""
        return sorted(self._sort_options.values(), key=lambda o: (o.index, o.name))

    @traced("search.dashboards")
    async def search(self, query: SearchQuery) -> HitList:
        """Run a search and return hits (none when there is no signed-in user).

        Raises:
            FilterConfigurationException: Unknown permission level or query type.
        """
        user = query.signed_in_user
        permission_filter = PermissionFilter(
            user,
            query.permission,
            query.type,
            nested_folders_enabled=self.nested_folders_enabled,
            recursive_queries_supported=self.recursive_queries_supported,
            max_nested_folder_depth=self.max_nested_folder_depth,
        )
        if user is None:
            logger.debug("No signed-in user; search matches nothing")
            add_span_event("search.no_user")
            return HitList()

        starred_ids = await self.star_repo.get_by_user(user.user_id)

        if query.is_starred and not starred_ids:
            logger.debug("User %s has no starred dashboards; skipping search", user.user_id)
            add_span_event("search.no_starred")
            return HitList()

        dashboard_ids = list(query.dashboard_ids)
        if query.is_starred and not query.dashboard_ids and not query.dashboard_uids:
            dashboard_ids = sorted(starred_ids)

        sort = self._sort_options.get(query.sort)
        find_query = FindDashboardsQuery(
            org_id=user.org_id,
            permission_filter=permission_filter,
            title=query.title,
            tags=list(query.tags),
            dashboard_uids=list(query.dashboard_uids),
            dashboard_ids=dashboard_ids,
            folder_ids=list(query.folder_ids),
            limit=query.limit,
            page=query.page,
            sort=sort,
        )
        hits = HitList(await self.dashboard_repo.find_dashboards(find_query))

        if sort is None:
            hits = _sorted_hits(hits)

        for hit in hits:
            if hit.id in starred_ids:
                hit.is_starred = True

        if query.is_starred:
            hits = hits.starred()

        add_span_attributes(**{"search.hits": len(hits), "search.starred_only": query.is_starred})
        return hits


def _sorted_hits(unsorted: HitList) -> HitList:
    """Order hits by title and each hit's tags lexicographically."""
    hits = unsorted.sorted_by_title()
    for hit in hits:
        hit.tags.sort()
    return hits
