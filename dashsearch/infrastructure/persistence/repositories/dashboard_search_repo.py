"""Dashboard search repository. Runs the permission-filtered search on the dashboard table."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from dashsearch.application.dtos.search import FindDashboardsQuery, Hit, HitList
from dashsearch.application.permissions.clause import Clause, in_clause
from dashsearch.domain.enums import HitType, QueryType
from dashsearch.infrastructure.persistence.sql import bind_positional, escape_like
from dashsearch.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)

_NATURAL_ORDER = "dashboard.id"


class DashboardSearchRepository:
    """Dashboard and folder search (implements IDashboardSearchRepository).

    One page of matching ids is selected first, then joined with the
    parent folder and tags; rows are folded into one Hit per dashboard.
    """

    def __init__(
        self,
        db: AsyncSession,
        default_limit: int = 1000,
        max_limit: int = 5000,
        app_sub_url: str = "",
    ) -> None:
        self.db = db
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.app_sub_url = app_sub_url.rstrip("/")

    @traced("search.find_dashboards")
    async def find_dashboards(self, query: FindDashboardsQuery) -> HitList:
        """Return hits for query, in the order given by query.sort (dashboard id when unset)."""
        sql, params = self.build_sql(query)
        stmt, bind = bind_positional(sql, params)
        result = await self.db.execute(stmt, bind)
        hits = self._make_hits(result.mappings().all())
        add_span_attributes(**{"db.rows.hits": len(hits)})
        return hits

    def build_sql(self, query: FindDashboardsQuery) -> tuple[str, list[Any]]:
        """Compose the search statement and its positional parameters."""
        recursive, permission = query.permission_filter.clauses()
        conditions = [Clause("dashboard.org_id = ?", (query.org_id,)), permission]
        conditions.extend(self._filters(query))

        order = _NATURAL_ORDER
        if query.sort is not None:
            order = f"{query.sort.order_by()}, {_NATURAL_ORDER}"
        limit = self._limit(query.limit)
        page = max(query.page, 1)

        where_sql = " AND ".join(f"({c.sql})" for c in conditions)
        sql = (
            "SELECT dashboard.id, dashboard.uid, dashboard.title, dashboard.slug, "
            "dashboard.is_folder, dashboard.folder_id, "
            "parent.uid AS folder_uid, parent.slug AS folder_slug, parent.title AS folder_title, "
            "dashboard_tag.term "
            "FROM ("
            f"SELECT dashboard.id FROM dashboard WHERE {where_sql} "
            f"ORDER BY {order} LIMIT ? OFFSET ?"
            ") AS ids "
            "INNER JOIN dashboard ON ids.id = dashboard.id "
            "LEFT OUTER JOIN dashboard AS parent ON parent.uid = dashboard.folder_uid "
            "AND parent.org_id = dashboard.org_id AND parent.is_folder "
            "LEFT OUTER JOIN dashboard_tag ON dashboard_tag.dashboard_id = dashboard.id "
            f"ORDER BY {order}"
        )
        if recursive.sql:
            sql = f"{recursive.sql}\n{sql}"

        params: list[Any] = list(recursive.params)
        for c in conditions:
            params.extend(c.params)
        params.extend([limit, limit * (page - 1)])
        logger.debug("Dashboard search: %d conditions, limit=%d page=%d", len(conditions), limit, page)
        return sql, params

    def _filters(self, query: FindDashboardsQuery) -> list[Clause]:
        filters: list[Clause] = []
        if query.query_type == QueryType.DASHBOARD:
            filters.append(Clause("NOT dashboard.is_folder"))
        elif query.query_type in (QueryType.FOLDER, QueryType.ALERT_FOLDER):
            filters.append(Clause("dashboard.is_folder"))
        if query.title:
            pattern = f"%{escape_like(query.title.lower())}%"
            filters.append(Clause("LOWER(dashboard.title) LIKE ? ESCAPE '\\'", (pattern,)))
        if query.tags:
            tags = sorted(set(query.tags))
            terms = in_clause("term", tags)
            filters.append(
                Clause(
                    "dashboard.id IN (SELECT dashboard_id FROM dashboard_tag "
                    f"WHERE {terms.sql} GROUP BY dashboard_id HAVING COUNT(1) >= ?)",
                    (*terms.params, len(tags)),
                )
            )
        if query.dashboard_ids:
            filters.append(in_clause("dashboard.id", query.dashboard_ids))
        if query.dashboard_uids:
            filters.append(in_clause("dashboard.uid", query.dashboard_uids))
        if query.folder_ids:
            filters.append(in_clause("dashboard.folder_id", query.folder_ids))
        return filters

    def _limit(self, limit: int) -> int:
        if limit < 1:
            return self.default_limit
        return min(limit, self.max_limit)

    def _make_hits(self, rows: Sequence[Any]) -> HitList:
        hits: dict[int, Hit] = {}
        for row in rows:
            hit = hits.get(row["id"])
            if hit is None:
                is_folder = bool(row["is_folder"])
                hit = Hit(
                    id=row["id"],
                    uid=row["uid"],
                    title=row["title"],
                    slug=row["slug"],
                    type=HitType.FOLDER if is_folder else HitType.DASHBOARD,
                    url=self._url(row["uid"], row["slug"], is_folder),
                    folder_id=row["folder_id"],
                    folder_uid=row["folder_uid"],
                    folder_title=row["folder_title"],
                    folder_url=(
                        self._url(row["folder_uid"], row["folder_slug"], True)
                        if row["folder_uid"]
                        else None
                    ),
                )
                hits[hit.id] = hit
            if row["term"]:
                hit.tags.append(row["term"])
        return HitList(hits.values())

    def _url(self, uid: str, slug: str, is_folder: bool) -> str:
        if is_folder:
            return f"{self.app_sub_url}/dashboards/f/{uid}/{slug}"
        return f"{self.app_sub_url}/d/{uid}/{slug}"
