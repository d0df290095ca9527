"""Domain exceptions for dashboard search.

Defines domain-level exceptions that represent configuration or
business rule violations. These exceptions are independent of
infrastructure concerns. Callers map them to their own responses.
"""

from typing import Any


class DashSearchException(Exception):
    """Base exception for all dashboard search errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, value).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class FilterConfigurationException(DashSearchException):
    """Raised when a permission filter is built with an unknown level or query type.

    This is a programmer error and fatal to the request; it is never
    downgraded to a deny-all predicate.
    """

    def __init__(self, field: str, value: Any) -> None:
        """Initialize with the offending field and value.

        Args:
            field: Name of the filter input ('permission_level' or 'query_type').
            value: The unrecognized value.
        """
        super().__init__(
            f"Unrecognized {field}: {value!r}",
            "FILTER_CONFIGURATION_ERROR",
            {"field": field, "value": value},
        )


class SqlNotConfiguredException(DashSearchException):
    """Raised when a SQL session is requested but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            "SQL database not configured. Set DATABASE_URL "
            "(e.g. sqlite+aiosqlite:///dashsearch.db or postgresql+asyncpg://...).",
            "SQL_NOT_CONFIGURED",
            {},
        )
