"""Seed a development database with folders, dashboards, tags and stars.

Creates the tables if missing, then inserts a small folder tree (with
nested subfolders in the folder table) and a set of dashboards spread
across it. Existing rows for the org are left untouched.

Usage:
    uv run python -m scripts.seed_dev_data [org_id]

Requires: DATABASE_URL (e.g. sqlite+aiosqlite:///dashsearch.db).
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import select

from dashsearch.core.config import get_settings
from dashsearch.infrastructure.persistence import database
from dashsearch.infrastructure.persistence.database import Base, _ensure_engine
from dashsearch.infrastructure.persistence.models import (
    Dashboard,
    DashboardTag,
    Folder,
    Star,
)
from dashsearch.shared.telemetry import setup_logging, setup_telemetry

# (uid, title, parent uid)
FOLDERS = [
    ("infra", "Infrastructure", None),
    ("infra-db", "Databases", "infra"),
    ("infra-db-pg", "Postgres", "infra-db"),
    ("apps", "Applications", None),
    ("apps-web", "Web", "apps"),
]

# (uid, title, folder uid, tags)
DASHBOARDS = [
    ("node-overview", "Node Overview", "infra", ["infra", "nodes"]),
    ("db-latency", "Database Latency", "infra-db", ["db", "latency"]),
    ("pg-replication", "Postgres Replication", "infra-db-pg", ["db", "postgres"]),
    ("pg-vacuum", "Postgres Vacuum", "infra-db-pg", ["db", "postgres"]),
    ("web-traffic", "Web Traffic", "apps-web", ["web"]),
    ("web-errors", "Web Errors", "apps-web", ["web", "errors"]),
    ("home", "Home", None, []),
]

STARRED = ["home", "web-errors"]
SEED_USER_ID = 1


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _slugify(title: str) -> str:
    return "-".join(title.lower().split())


async def run(org_id: int) -> None:
    _load_env()
    get_settings.cache_clear()
    settings = get_settings()
    setup_logging(settings)
    _ensure_engine()
    assert database.engine is not None
    telemetry = setup_telemetry(settings, database.engine)
    try:
        await _seed(org_id)
    finally:
        telemetry.shutdown()
    print("Seed completed.")


async def _seed(org_id: int) -> None:
    assert database.engine is not None and database.AsyncSessionLocal is not None
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with database.AsyncSessionLocal() as session:
        existing = await session.execute(
            select(Dashboard.uid).where(Dashboard.org_id == org_id)
        )
        known = set(existing.scalars().all())

        folder_ids: dict[str, int] = {}
        for uid, title, parent_uid in FOLDERS:
            if uid in known:
                print(f"  Skip folder {uid}: exists")
                continue
            row = Dashboard(
                org_id=org_id,
                uid=uid,
                slug=_slugify(title),
                title=title,
                is_folder=True,
                folder_uid=parent_uid,
            )
            session.add(row)
            session.add(Folder(org_id=org_id, uid=uid, parent_uid=parent_uid, title=title))
            await session.flush()
            folder_ids[uid] = row.id
            print(f"  Folder {uid} -> {row.id}")

        dashboard_ids: dict[str, int] = {}
        for uid, title, folder_uid, tags in DASHBOARDS:
            if uid in known:
                print(f"  Skip dashboard {uid}: exists")
                continue
            row = Dashboard(
                org_id=org_id,
                uid=uid,
                slug=_slugify(title),
                title=title,
                is_folder=False,
                folder_uid=folder_uid,
                folder_id=folder_ids.get(folder_uid) if folder_uid else None,
            )
            session.add(row)
            await session.flush()
            for term in tags:
                session.add(DashboardTag(dashboard_id=row.id, term=term))
            dashboard_ids[uid] = row.id
            print(f"  Dashboard {uid} -> {row.id}")

        for uid in STARRED:
            if uid in dashboard_ids:
                session.add(Star(user_id=SEED_USER_ID, dashboard_id=dashboard_ids[uid]))

        await session.commit()


def main() -> None:
    org_id = int(sys.argv[1]) if len(sys.argv) > 1 else 1
    asyncio.run(run(org_id))


if __name__ == "__main__":
    main()
