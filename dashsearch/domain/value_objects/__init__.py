"""Domain value objects: classified permission scopes."""

from dashsearch.domain.value_objects.scope import (
    AllWildcard,
    KindWildcard,
    ResourceScope,
    Scope,
    ScopeKind,
    classify_scope,
    scope_uid,
)

__all__ = [
    "AllWildcard",
    "KindWildcard",
    "ResourceScope",
    "Scope",
    "ScopeKind",
    "classify_scope",
    "scope_uid",
]
