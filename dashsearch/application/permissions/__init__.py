"""Permission filter: scopes to SQL predicate for dashboard search."""

from dashsearch.application.permissions.actions import (
    ActionRequirement,
    required_actions,
)
from dashsearch.application.permissions.clause import (
    ALWAYS_FALSE,
    ALWAYS_TRUE,
    Clause,
)
from dashsearch.application.permissions.filter import FilterResult, PermissionFilter
from dashsearch.application.permissions.nested import NestedFolderExpander
from dashsearch.application.permissions.predicate import ActionPredicateBuilder

__all__ = [
    "ALWAYS_FALSE",
    "ALWAYS_TRUE",
    "ActionPredicateBuilder",
    "ActionRequirement",
    "Clause",
    "FilterResult",
    "NestedFolderExpander",
    "PermissionFilter",
    "required_actions",
]
