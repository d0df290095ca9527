"""Domain enumerations for dashboard search.

Enums represent fixed sets of domain values (permission levels, query
types, hit types). Parsing helpers raise FilterConfigurationException
for unknown input instead of falling back to a default.
"""

from enum import Enum, IntEnum

from dashsearch.domain.exceptions import FilterConfigurationException


class PermissionLevel(IntEnum):
    """Coarse access tier requested by a search.

    Anything above VIEW requires the write/create actions as well as read.
    """

    VIEW = 1
    EDIT = 2
    ADMIN = 4

    @property
    def needs_edit(self) -> bool:
        return self > PermissionLevel.VIEW

    @classmethod
    def parse(cls, value: "PermissionLevel | int | str") -> "PermissionLevel":
        """Return the level for an enum member, its int value, or its name (case-insensitive).

        Raises:
            FilterConfigurationException: If the value is not a known level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise FilterConfigurationException("permission_level", value) from None
        # bool is an int subclass but never a level
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise FilterConfigurationException("permission_level", value) from None
        raise FilterConfigurationException("permission_level", value)


class QueryType(str, Enum):
    """Discriminator selecting the required actions and target row class."""

    ALL = ""
    DASHBOARD = "dash-db"
    FOLDER = "dash-folder"
    ALERT_FOLDER = "dash-folder-alerting"

    @classmethod
    def parse(cls, value: "QueryType | str | None") -> "QueryType":
        """Return the query type for an enum member or its string value (None means ALL).

        Raises:
            FilterConfigurationException: If the value is not a known query type.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.ALL
        try:
            return cls(value)
        except ValueError:
            raise FilterConfigurationException("query_type", value) from None

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid query type values as strings."""
        return [query_type.value for query_type in cls]


class HitType(str, Enum):
    """Kind of a search hit row."""

    DASHBOARD = "dash-db"
    FOLDER = "dash-folder"
