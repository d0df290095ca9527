"""Dashboard permission filter: the user's access rendered as an embeddable SQL predicate.

The predicate is written against the "dashboard" table, which holds both
dashboards and folders (is_folder). Usage:

    recursive_cte, where, params = PermissionFilter(user, PermissionLevel.VIEW).where()
    sql = f"{recursive_cte}\nSELECT COUNT(*) FROM dashboard WHERE {where}"

Every dynamic value is a "?" parameter; params lists CTE values first,
then WHERE values. Nothing is cached: scopes can change between requests.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from dashsearch.application.permissions.actions import (
    ActionRequirement,
    required_actions,
)
from dashsearch.application.permissions.clause import (
    ALWAYS_FALSE,
    ALWAYS_TRUE,
    Clause,
    join_clauses,
)
from dashsearch.application.permissions.nested import NestedFolderExpander
from dashsearch.application.permissions.predicate import ActionPredicateBuilder
from dashsearch.core.constants import SQL_FALSE
from dashsearch.domain.entities.user import SignedInUser
from dashsearch.domain.enums import HitType, PermissionLevel, QueryType

logger = logging.getLogger(__name__)

_ROW_GUARDS = {
    HitType.DASHBOARD: "NOT dashboard.is_folder",
    HitType.FOLDER: "dashboard.is_folder",
}


class FilterResult(NamedTuple):
    """Recursive CTE (may be empty), WHERE condition, and their parameters in order."""

    recursive_cte: str
    where: str
    params: list[Any]


class PermissionFilter:
    """Restricts a dashboard search to rows the user may act on.

    Raises FilterConfigurationException on an unknown permission level or
    query type. A user without permissions in their org matches nothing.
    """

    def __init__(
        self,
        user: SignedInUser | None,
        permission_level: PermissionLevel | int | str,
        query_type: QueryType | str | None = QueryType.ALL,
        nested_folders_enabled: bool = False,
        recursive_queries_supported: bool = True,
        max_nested_folder_depth: int = 8,
    ) -> None:
        self.user = user
        self.permission_level = PermissionLevel.parse(permission_level)
        self.query_type = QueryType.parse(query_type)
        self.nested_folders_enabled = nested_folders_enabled
        self.recursive_queries_supported = recursive_queries_supported
        self.max_nested_folder_depth = max_nested_folder_depth
        self.requirement: ActionRequirement = required_actions(
            self.permission_level, self.query_type
        )
        logger.debug(
            "Permission filter: level=%s query_type=%r dashboard_actions=%s folder_actions=%s nested=%s",
            self.permission_level.name,
            self.query_type.value,
            self.requirement.dashboard_actions,
            self.requirement.folder_actions,
            self.nested_folders_enabled,
        )

    def where(self) -> FilterResult:
        """Build (recursive_cte, where, params). Same inputs always give the same output."""
        recursive, where = self.clauses()
        return FilterResult(recursive.sql, where.sql, [*recursive.params, *where.params])

    def clauses(self) -> tuple[Clause, Clause]:
        """Return the recursive CTE clause (possibly empty) and the WHERE clause separately."""
        permissions = self.user.org_permissions() if self.user is not None else None
        if permissions is None:
            return Clause(""), Clause(f"({SQL_FALSE})")

        expander = NestedFolderExpander(
            org_id=self.user.org_id,
            enabled=self.nested_folders_enabled,
            recursive_queries_supported=self.recursive_queries_supported,
            max_depth=self.max_nested_folder_depth,
        )
        parts: list[Clause] = []
        if self.requirement.dashboard_actions:
            parts.append(
                self._rows_clause(
                    HitType.DASHBOARD, self.requirement.dashboard_actions, permissions, expander
                )
            )
        if self.requirement.folder_actions:
            parts.append(
                self._rows_clause(
                    HitType.FOLDER, self.requirement.folder_actions, permissions, expander
                )
            )

        where = join_clauses(parts, "OR")
        return expander.with_clause(), Clause(f"({where.sql})", where.params)

    @staticmethod
    def _rows_clause(
        target: HitType,
        actions: Sequence[str],
        permissions: Mapping[str, Sequence[str]],
        expander: NestedFolderExpander,
    ) -> Clause:
        """AND of the row guard and one predicate per required action."""
        builder = ActionPredicateBuilder(target, expander)
        clauses = [builder.build(action, permissions.get(action, ())) for action in actions]
        if ALWAYS_FALSE in clauses:
            return ALWAYS_FALSE
        required = [clause for clause in clauses if clause != ALWAYS_TRUE]
        return join_clauses([Clause(_ROW_GUARDS[target]), *required], "AND")
