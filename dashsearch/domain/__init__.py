"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure. Used by application and
infrastructure layers.
"""

from dashsearch.domain.entities import Permission, SignedInUser
from dashsearch.domain.enums import HitType, PermissionLevel, QueryType
from dashsearch.domain.exceptions import (
    DashSearchException,
    FilterConfigurationException,
    SqlNotConfiguredException,
)
from dashsearch.domain.value_objects import Scope, ScopeKind, classify_scope

__all__ = [
    # Entities
    "Permission",
    "SignedInUser",
    # Enums
    "HitType",
    "PermissionLevel",
    "QueryType",
    # Exceptions
    "DashSearchException",
    "FilterConfigurationException",
    "SqlNotConfiguredException",
    # Value objects
    "Scope",
    "ScopeKind",
    "classify_scope",
]
