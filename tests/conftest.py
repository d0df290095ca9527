"""Pytest configuration and fixtures for dashsearch.

DB-dependent fixtures run against an in-memory SQLite database
(sqlite+aiosqlite) created from Base.metadata; no server is needed.
Row builders live in tests/support.py.
"""

from collections.abc import AsyncIterator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from dashsearch.core.config import Settings
from dashsearch.infrastructure.persistence.database import (
    Base,
    create_db_engine,
    create_session_factory,
)
from dashsearch.infrastructure.persistence.models import Dashboard, Folder
from tests.support import ORG_ID, OTHER_ORG_ID


@pytest.fixture
def sqlite_settings() -> Settings:
    return Settings(database_url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def db_engine(sqlite_settings: Settings) -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory database with all tables."""
    engine = create_db_engine(sqlite_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    factory = create_session_factory(db_engine)
    async with factory() as session:
        yield session


@pytest.fixture
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """10 folders (uid "1".."10") and 100 dashboards (uid "11".."110"), 10 per folder.

    Dashboard n (1-based) lives in folder str(n % 10), or "10" when
    n % 10 == 0. A copy of one folder and dashboard exists in another org.
    """
    folder_ids: dict[str, int] = {}
    for i in range(1, 11):
        uid = str(i)
        folder = Dashboard(
            org_id=ORG_ID, uid=uid, slug=f"folder-{i}", title=f"Folder {i}", is_folder=True
        )
        db_session.add(folder)
        db_session.add(Folder(org_id=ORG_ID, uid=uid, title=f"Folder {i}"))
        await db_session.flush()
        folder_ids[uid] = folder.id

    for i in range(1, 101):
        folder_uid = str(i % 10) if i % 10 else "10"
        db_session.add(
            Dashboard(
                org_id=ORG_ID,
                uid=str(i + 10),
                slug=f"dashboard-{i}",
                title=f"Dashboard {i}",
                is_folder=False,
                folder_uid=folder_uid,
                folder_id=folder_ids[folder_uid],
            )
        )

    db_session.add(
        Dashboard(org_id=OTHER_ORG_ID, uid="1", slug="other", title="Other", is_folder=True)
    )
    db_session.add(
        Dashboard(
            org_id=OTHER_ORG_ID,
            uid="11",
            slug="other-dash",
            title="Other Dash",
            is_folder=False,
            folder_uid="1",
        )
    )
    await db_session.commit()
    return db_session


