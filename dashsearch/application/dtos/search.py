"""DTOs for dashboard search (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field

from dashsearch.application.permissions.filter import PermissionFilter
from dashsearch.domain.entities.user import SignedInUser
from dashsearch.domain.enums import HitType, PermissionLevel, QueryType


@dataclass
class Hit:
    """Single search hit: a dashboard or a folder. is_starred is set by SearchService."""

    id: int
    uid: str
    title: str
    type: HitType
    slug: str = ""
    url: str = ""
    tags: list[str] = field(default_factory=list)
    is_starred: bool = False
    folder_id: int | None = None
    folder_uid: str | None = None
    folder_title: str | None = None
    folder_url: str | None = None


class HitList(list[Hit]):
    """Ordered hits. Title ordering is case-sensitive."""

    def sorted_by_title(self, descending: bool = False) -> HitList:
        """Return a new list ordered by title (ties keep their current order)."""
        return HitList(sorted(self, key=lambda hit: hit.title, reverse=descending))

    def starred(self) -> HitList:
        """Return only the hits flagged as starred."""
        return HitList(hit for hit in self if hit.is_starred)


@dataclass(frozen=True)
class SortOption:
    """Named sort offered to clients; the repository turns it into ORDER BY."""

    name: str
    display_name: str
    description: str
    index: int
    descending: bool = False

    def order_by(self) -> str:
        return "dashboard.title DESC" if self.descending else "dashboard.title ASC"


SORT_ALPHA_ASC = SortOption(
    name="alpha-asc",
    display_name="Alphabetically (A-Z)",
    description="Sort results in an alphabetically ascending order",
    index=0,
)
SORT_ALPHA_DESC = SortOption(
    name="alpha-desc",
    display_name="Alphabetically (Z-A)",
    description="Sort results in an alphabetically descending order",
    index=1,
    descending=True,
)


@dataclass
class SearchQuery:
    """Search request as received from the caller.

    sort is a registered sort option name; empty or unknown names leave
    ordering to SearchService's default (title, then tags per hit). A
    missing signed_in_user matches nothing, as in PermissionFilter.
    """

    signed_in_user: SignedInUser | None
    title: str = ""
    tags: list[str] = field(default_factory=list)
    limit: int = 0
    page: int = 1
    is_starred: bool = False
    type: str = ""
    dashboard_uids: list[str] = field(default_factory=list)
    dashboard_ids: list[int] = field(default_factory=list)
    folder_ids: list[int] = field(default_factory=list)
    permission: PermissionLevel | int | str = PermissionLevel.VIEW
    sort: str = ""

    @property
    def org_id(self) -> int | None:
        return self.signed_in_user.org_id if self.signed_in_user is not None else None


@dataclass
class FindDashboardsQuery:
    """Query handed to the dashboard search repository, with the permission filter embedded."""

    org_id: int
    permission_filter: PermissionFilter
    title: str = ""
    tags: list[str] = field(default_factory=list)
    dashboard_uids: list[str] = field(default_factory=list)
    dashboard_ids: list[int] = field(default_factory=list)
    folder_ids: list[int] = field(default_factory=list)
    limit: int = 0
    page: int = 1
    sort: SortOption | None = None

    @property
    def query_type(self) -> QueryType:
        return self.permission_filter.query_type
