"""Signed-in user and granted permissions.

Permissions are resolved by another component before search runs; this
module only holds them in the shape the permission filter reads.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Permission:
    """One granted (action, scope) pair, e.g. ("dashboards:read", "folders:uid:abc")."""

    action: str
    scope: str


def group_scopes_by_action(permissions: Iterable[Permission]) -> dict[str, list[str]]:
    """Group scopes by action, keeping first-seen order and dropping duplicates."""
    grouped: dict[str, list[str]] = {}
    for permission in permissions:
        scopes = grouped.setdefault(permission.action, [])
        if permission.scope not in scopes:
            scopes.append(permission.scope)
    return grouped


@dataclass
class SignedInUser:
    """User performing a search.

    permissions maps org_id -> action -> scopes. Only the entry for org_id
    is consulted when building a filter.
    """

    user_id: int
    org_id: int
    login: str = ""
    permissions: dict[int, dict[str, list[str]]] = field(default_factory=dict)

    def org_permissions(self) -> Mapping[str, Sequence[str]] | None:
        """Return the action -> scopes map for the current org, or None if absent."""
        return self.permissions.get(self.org_id)

    @classmethod
    def with_permissions(
        cls,
        user_id: int,
        org_id: int,
        permissions: Iterable[Permission],
        login: str = "",
    ) -> SignedInUser:
        """Build a user whose org_id permissions are the given (action, scope) pairs."""
        return cls(
            user_id=user_id,
            org_id=org_id,
            login=login,
            permissions={org_id: group_scopes_by_action(permissions)},
        )
