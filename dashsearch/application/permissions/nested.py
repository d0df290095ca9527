"""Folder inheritance for nested folders.

A permission granted on a folder applies to the folder and to every
folder below it. When nested folders are enabled the granted uids are
expanded in the database, either with a recursive CTE over
folder.parent_uid or, for dialects without WITH RECURSIVE, with one
self-join per ancestor level up to max_depth. Both match the same set of
folders for trees no deeper than max_depth.
"""

from __future__ import annotations

from collections.abc import Sequence

from dashsearch.application.permissions.clause import (
    ALWAYS_FALSE,
    Clause,
    in_clause,
)
from dashsearch.core.constants import RECURSIVE_QUERY_PREFIX


class NestedFolderExpander:
    """Turns granted folder uids into a match on a folder uid column.

    Disabled: a literal IN list. Enabled: descendants are included. Each
    recursive query is registered under RecQry<n> and rendered by
    with_clause(); one expander serves one predicate.
    """

    def __init__(
        self,
        org_id: int,
        enabled: bool = False,
        recursive_queries_supported: bool = True,
        max_depth: int = 8,
    ) -> None:
        self.org_id = org_id
        self.enabled = enabled
        self.recursive_queries_supported = recursive_queries_supported
        self.max_depth = max_depth
        self._recursive_queries: list[Clause] = []

    def match(self, column: str, folder_uids: Sequence[str]) -> Clause:
        """Return a clause matching column against folder_uids (and their descendants when enabled)."""
        if not folder_uids:
            return ALWAYS_FALSE
        if not self.enabled:
            return in_clause(column, folder_uids)
        if self.recursive_queries_supported:
            name = self._add_recursive_query(folder_uids)
            return Clause(f"{column} IN (SELECT uid FROM {name})")
        return self._ancestor_union(column, folder_uids)

    def with_clause(self) -> Clause:
        """Return "WITH RECURSIVE ..." for the registered queries, or an empty clause."""
        if not self._recursive_queries:
            return Clause("")
        sql = "WITH RECURSIVE " + ",\n".join(q.sql for q in self._recursive_queries)
        params: tuple = ()
        for q in self._recursive_queries:
            params += q.params
        return Clause(sql, params)

    def _add_recursive_query(self, folder_uids: Sequence[str]) -> str:
        name = f"{RECURSIVE_QUERY_PREFIX}{len(self._recursive_queries)}"
        seed = in_clause("uid", folder_uids)
        sql = (
            f"{name} AS (\n"
            f"\tSELECT uid, parent_uid, org_id FROM folder WHERE org_id = ? AND {seed.sql}\n"
            f"\tUNION ALL SELECT f.uid, f.parent_uid, f.org_id FROM folder f "
            f"INNER JOIN {name} r ON f.parent_uid = r.uid AND f.org_id = r.org_id\n"
            ")"
        )
        self._recursive_queries.append(Clause(sql, (self.org_id, *seed.params)))
        return name

    def _ancestor_union(self, column: str, folder_uids: Sequence[str]) -> Clause:
        # Level d selects folders whose d-th ancestor is granted (d = 0 is the folder itself).
        selects: list[str] = []
        params: tuple = ()
        for depth in range(self.max_depth):
            joins = "".join(
                f" INNER JOIN folder f{i} ON f{i}.uid = f{i - 1}.parent_uid"
                f" AND f{i}.org_id = f{i - 1}.org_id"
                for i in range(1, depth + 1)
            )
            seed = in_clause(f"f{depth}.uid", folder_uids)
            selects.append(
                f"SELECT f0.uid FROM folder f0{joins} WHERE f{depth}.org_id = ? AND {seed.sql}"
            )
            params += (self.org_id, *seed.params)
        return Clause(f"{column} IN ({' UNION '.join(selects)})", params)
