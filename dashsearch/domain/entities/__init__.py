"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from dashsearch.domain.entities.user import (
    Permission,
    SignedInUser,
    group_scopes_by_action,
)

__all__ = ["Permission", "SignedInUser", "group_scopes_by_action"]
