"""Permission scope value objects and the scope classifier.

A scope string names the resources an action applies to:

    "*"                   every resource
    "folders:*"           every folder
    "folders:uid:*"       every folder, addressed by uid
    "dashboards:uid:42"   one dashboard

classify_scope maps every string to exactly one variant. Strings that do
not follow the "<kind>:<attribute>:<identifier>" shape become an opaque
ResourceScope with no kind; they only ever equal themselves and so never
match a dashboard or folder uid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from dashsearch.core.constants import SCOPE_ATTRIBUTE_UID, SCOPE_SEP, SCOPE_WILDCARD


class ScopeKind(str, Enum):
    """Tag of a classified scope."""

    ALL_WILDCARD = "all_wildcard"
    KIND_WILDCARD = "kind_wildcard"
    RESOURCE = "resource"


@dataclass(frozen=True)
class AllWildcard:
    """The "*" scope: grants the action on every resource."""

    raw: str = SCOPE_WILDCARD

    @property
    def tag(self) -> ScopeKind:
        return ScopeKind.ALL_WILDCARD


@dataclass(frozen=True)
class KindWildcard:
    """Wildcard over one kind, e.g. "folders:*" (attribute None) or "folders:uid:*"."""

    raw: str
    kind: str
    attribute: str | None = None

    @property
    def tag(self) -> ScopeKind:
        return ScopeKind.KIND_WILDCARD

    def covers(self, kind: str) -> bool:
        """Return True if this wildcard grants every resource of kind (addressed by uid)."""
        return self.kind == kind and self.attribute in (None, SCOPE_ATTRIBUTE_UID)


@dataclass(frozen=True)
class ResourceScope:
    """A single resource, e.g. "dashboards:uid:42". Opaque scopes have kind None."""

    raw: str
    kind: str | None = None
    attribute: str | None = None
    identifier: str | None = None

    @property
    def tag(self) -> ScopeKind:
        return ScopeKind.RESOURCE

    def uid_for(self, kind: str) -> str | None:
        """Return the uid if this scope addresses a resource of kind by uid, else None."""
        if self.kind == kind and self.attribute == SCOPE_ATTRIBUTE_UID:
            return self.identifier
        return None


Scope = Union[AllWildcard, KindWildcard, ResourceScope]


def classify_scope(scope: str) -> Scope:
    """Classify a raw scope string. Pure and total: never raises."""
    if scope == SCOPE_WILDCARD:
        return AllWildcard()
    parts = scope.split(SCOPE_SEP, 2)
    if any(not part for part in parts):
        return ResourceScope(raw=scope)
    if len(parts) == 2 and parts[1] == SCOPE_WILDCARD:
        return KindWildcard(raw=scope, kind=parts[0])
    if len(parts) == 3:
        kind, attribute, identifier = parts
        if identifier == SCOPE_WILDCARD:
            return KindWildcard(raw=scope, kind=kind, attribute=attribute)
        return ResourceScope(
            raw=scope, kind=kind, attribute=attribute, identifier=identifier
        )
    return ResourceScope(raw=scope)


def scope_uid(kind: str, uid: str) -> str:
    """Build the uid scope for a resource, e.g. scope_uid("folders", "abc") -> "folders:uid:abc"."""
    return SCOPE_SEP.join((kind, SCOPE_ATTRIBUTE_UID, uid))
