"""Starred dashboards repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dashsearch.infrastructure.persistence.models.star import Star


class StarRepository:
    """Reads the dashboards a user has starred (implements IStarRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_user(self, user_id: int) -> set[int]:
        """Return ids of dashboards starred by user_id."""
        result = await self.db.execute(
            select(Star.dashboard_id).where(Star.user_id == user_id)
        )
        return set(result.scalars().all())
