"""DashboardSearchRepository and SearchService against SQLite."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from dashsearch.application.dtos.search import (
    SORT_ALPHA_ASC,
    FindDashboardsQuery,
    SearchQuery,
)
from dashsearch.application.permissions import PermissionFilter
from dashsearch.composition import build_search_service
from dashsearch.core.config import Settings
from dashsearch.domain.entities.user import Permission, SignedInUser
from dashsearch.domain.enums import HitType, PermissionLevel
from dashsearch.infrastructure.persistence.repositories import (
    DashboardSearchRepository,
    StarRepository,
)
from tests.support import ORG_ID, add_dashboard, add_folder, star

USER_ID = 42


def _admin() -> SignedInUser:
    return SignedInUser.with_permissions(
        user_id=USER_ID,
        org_id=ORG_ID,
        permissions=[Permission("dashboards:read", "*"), Permission("folders:read", "*")],
    )


def _query(user: SignedInUser | None = None, query_type: str = "", **kwargs) -> FindDashboardsQuery:
    user = user or _admin()
    return FindDashboardsQuery(
        org_id=ORG_ID,
        permission_filter=PermissionFilter(user, PermissionLevel.VIEW, query_type),
        **kwargs,
    )


@pytest.fixture
async def catalog(db_session: AsyncSession) -> dict[str, int]:
    """Folder "Ops" with two dashboards, two dashboards at the root."""
    ids = {"ops": await add_folder(db_session, "ops", "Ops")}
    ids["cpu"] = await add_dashboard(
        db_session, "cpu-usage", "CPU Usage", "ops", ids["ops"], tags=["prod", "linux"]
    )
    ids["disk"] = await add_dashboard(db_session, "disk", "Disk", "ops", ids["ops"])
    ids["memory"] = await add_dashboard(db_session, "memory", "Memory", tags=["prod"])
    ids["spikes"] = await add_dashboard(db_session, "spikes", "cpu_spikes 100%")
    await db_session.commit()
    return ids


@pytest.fixture
def repo(db_session: AsyncSession) -> DashboardSearchRepository:
    return DashboardSearchRepository(db_session)


@pytest.mark.asyncio
async def test_title_filter_is_case_insensitive(repo, catalog) -> None:
    hits = await repo.find_dashboards(_query(title="cpu"))
    assert sorted(hit.uid for hit in hits) == ["cpu-usage", "spikes"]


@pytest.mark.asyncio
@pytest.mark.parametrize("title", ["100%", "_"])
async def test_title_wildcards_match_literally(repo, catalog, title: str) -> None:
    hits = await repo.find_dashboards(_query(title=title))
    assert [hit.uid for hit in hits] == ["spikes"]


@pytest.mark.asyncio
async def test_tags_must_all_match(repo, catalog) -> None:
    both = await repo.find_dashboards(_query(tags=["prod", "linux", "prod"]))
    prod = await repo.find_dashboards(_query(tags=["prod"]))
    assert [hit.uid for hit in both] == ["cpu-usage"]
    assert sorted(hit.uid for hit in prod) == ["cpu-usage", "memory"]


@pytest.mark.asyncio
async def test_hit_fields(repo, catalog) -> None:
    hits = await repo.find_dashboards(_query(dashboard_uids=["cpu-usage"]))
    assert len(hits) == 1
    hit = hits[0]
    assert hit.id == catalog["cpu"]
    assert hit.type == HitType.DASHBOARD
    assert hit.url == "/d/cpu-usage/cpu-usage"
    assert sorted(hit.tags) == ["linux", "prod"]
    assert hit.folder_id == catalog["ops"]
    assert hit.folder_uid == "ops"
    assert hit.folder_title == "Ops"
    assert hit.folder_url == "/dashboards/f/ops/ops"
    assert hit.is_starred is False


@pytest.mark.asyncio
async def test_root_dashboard_has_no_folder(repo, catalog) -> None:
    hits = await repo.find_dashboards(_query(dashboard_ids=[catalog["memory"]]))
    assert [(hit.folder_uid, hit.folder_title, hit.folder_url) for hit in hits] == [
        (None, None, None)
    ]


@pytest.mark.asyncio
async def test_folder_query_type(db_session, catalog) -> None:
    repo = DashboardSearchRepository(db_session, app_sub_url="/monitoring/")
    hits = await repo.find_dashboards(_query(query_type="dash-folder"))
    assert [(hit.uid, hit.type, hit.url) for hit in hits] == [
        ("ops", HitType.FOLDER, "/monitoring/dashboards/f/ops/ops")
    ]


@pytest.mark.asyncio
async def test_dashboard_query_type_excludes_folders(repo, catalog) -> None:
    hits = await repo.find_dashboards(_query(query_type="dash-db"))
    assert len(hits) == 4
    assert all(hit.type == HitType.DASHBOARD for hit in hits)


@pytest.mark.asyncio
async def test_folder_ids_filter(repo, catalog) -> None:
    hits = await repo.find_dashboards(_query(folder_ids=[catalog["ops"]]))
    assert sorted(hit.uid for hit in hits) == ["cpu-usage", "disk"]


@pytest.mark.asyncio
async def test_sorted_paging(repo, catalog) -> None:
    first = await repo.find_dashboards(_query(sort=SORT_ALPHA_ASC, limit=2, page=1))
    second = await repo.find_dashboards(_query(sort=SORT_ALPHA_ASC, limit=2, page=2))
    third = await repo.find_dashboards(_query(sort=SORT_ALPHA_ASC, limit=2, page=3))
    assert [hit.title for hit in first] == ["CPU Usage", "Disk"]
    assert [hit.title for hit in second] == ["Memory", "Ops"]
    assert [hit.title for hit in third] == ["cpu_spikes 100%"]


@pytest.mark.asyncio
async def test_limit_is_clamped(db_session, catalog) -> None:
    repo = DashboardSearchRepository(db_session, default_limit=1, max_limit=3)
    assert len(await repo.find_dashboards(_query())) == 1
    assert len(await repo.find_dashboards(_query(limit=10))) == 3


@pytest.mark.asyncio
async def test_permission_filter_restricts_results(repo, catalog) -> None:
    user = SignedInUser.with_permissions(
        user_id=USER_ID,
        org_id=ORG_ID,
        permissions=[Permission("dashboards:read", "folders:uid:ops")],
    )
    hits = await repo.find_dashboards(_query(user))
    assert sorted(hit.uid for hit in hits) == ["cpu-usage", "disk"]


@pytest.mark.asyncio
async def test_star_repository(db_session, catalog) -> None:
    await star(db_session, USER_ID, catalog["disk"])
    await star(db_session, USER_ID + 1, catalog["memory"])
    assert await StarRepository(db_session).get_by_user(USER_ID) == {catalog["disk"]}
    assert await StarRepository(db_session).get_by_user(7) == set()


@pytest.mark.asyncio
async def test_search_service_end_to_end(db_session, catalog) -> None:
    await star(db_session, USER_ID, catalog["disk"])
    await star(db_session, USER_ID, catalog["spikes"])
    service = build_search_service(db_session, Settings(_env_file=None))

    everything = await service.search(SearchQuery(signed_in_user=_admin()))
    starred = await service.search(SearchQuery(signed_in_user=_admin(), is_starred=True))

    assert [hit.title for hit in everything] == [
        "CPU Usage",
        "Disk",
        "Memory",
        "Ops",
        "cpu_spikes 100%",
    ]
    assert everything[0].tags == ["linux", "prod"]
    assert [hit.uid for hit in starred] == ["disk", "spikes"]
    assert all(hit.is_starred for hit in starred)


@pytest.mark.asyncio
async def test_search_service_nested_folders(db_session: AsyncSession) -> None:
    await add_folder(db_session, "team", "Team")
    await add_folder(db_session, "team-sub", "Team Sub", parent_uid="team")
    await add_dashboard(db_session, "deep", "Deep", "team-sub")
    await db_session.commit()
    user = SignedInUser.with_permissions(
        user_id=USER_ID,
        org_id=ORG_ID,
        permissions=[
            Permission("dashboards:read", "folders:uid:team"),
            Permission("folders:read", "folders:uid:team"),
        ],
    )

    flat = build_search_service(db_session, Settings(_env_file=None))
    nested = build_search_service(
        db_session, Settings(_env_file=None, nested_folders_enabled=True)
    )

    assert [hit.uid for hit in await flat.search(SearchQuery(signed_in_user=user))] == ["team"]
    assert [hit.uid for hit in await nested.search(SearchQuery(signed_in_user=user))] == [
        "deep",
        "team",
        "team-sub",
    ]
