"""Row builders and query helpers shared by DB-backed tests."""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from dashsearch.infrastructure.persistence.models import (
    Dashboard,
    DashboardTag,
    Folder,
    Star,
)
from dashsearch.infrastructure.persistence.sql import bind_positional

ORG_ID = 1
OTHER_ORG_ID = 2


async def add_folder(
    session: AsyncSession, uid: str, title: str, parent_uid: str | None = None
) -> int:
    """Insert a folder in both the dashboard and folder tables; return its dashboard id."""
    row = Dashboard(
        org_id=ORG_ID,
        uid=uid,
        slug=title.lower().replace(" ", "-"),
        title=title,
        is_folder=True,
        folder_uid=parent_uid,
    )
    session.add(row)
    session.add(Folder(org_id=ORG_ID, uid=uid, parent_uid=parent_uid, title=title))
    await session.flush()
    return row.id


async def add_dashboard(
    session: AsyncSession,
    uid: str,
    title: str,
    folder_uid: str | None = None,
    folder_id: int | None = None,
    tags: Sequence[str] = (),
) -> int:
    """Insert a dashboard with optional tags; return its id."""
    row = Dashboard(
        org_id=ORG_ID,
        uid=uid,
        slug=title.lower().replace(" ", "-"),
        title=title,
        is_folder=False,
        folder_uid=folder_uid,
        folder_id=folder_id,
    )
    session.add(row)
    await session.flush()
    for term in tags:
        session.add(DashboardTag(dashboard_id=row.id, term=term))
    await session.flush()
    return row.id


async def star(session: AsyncSession, user_id: int, dashboard_id: int) -> None:
    session.add(Star(user_id=user_id, dashboard_id=dashboard_id))
    await session.flush()


async def count_matching(
    session: AsyncSession,
    org_id: int,
    recursive_cte: str,
    where: str,
    params: Sequence,
) -> int:
    """Count dashboard rows of org_id matching where, with an optional CTE prefix."""
    sql = f"SELECT COUNT(*) FROM dashboard WHERE dashboard.org_id = ? AND {where}"
    if recursive_cte:
        sql = f"{recursive_cte}\n{sql}"
    split = recursive_cte.count("?")
    stmt, bind = bind_positional(sql, [*params[:split], org_id, *params[split:]])
    result = await session.execute(stmt, bind)
    return result.scalar_one()
