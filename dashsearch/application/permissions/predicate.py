"""Per-action predicate: which rows of one class an action's scopes grant."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dashsearch.application.permissions.clause import (
    ALWAYS_FALSE,
    ALWAYS_TRUE,
    Clause,
    in_clause,
    join_clauses,
)
from dashsearch.application.permissions.nested import NestedFolderExpander
from dashsearch.core.constants import KIND_DASHBOARDS, KIND_FOLDERS
from dashsearch.domain.enums import HitType
from dashsearch.domain.value_objects.scope import (
    AllWildcard,
    KindWildcard,
    ResourceScope,
    Scope,
    classify_scope,
)

logger = logging.getLogger(__name__)


class ActionPredicateBuilder:
    """Builds the OR-of-scopes condition for one action over dashboard or folder rows.

    Dashboard rows match on their own uid (dashboards:uid:X) or on their
    folder (folders:uid:X). Folder rows match on their own uid
    (folders:uid:X). A wildcard covering the row class short-circuits to
    ALWAYS_TRUE; no usable scope gives ALWAYS_FALSE.
    """

    def __init__(self, target: HitType, expander: NestedFolderExpander) -> None:
        self.target = target
        self.expander = expander
        if target == HitType.DASHBOARD:
            self._wildcard_kinds: tuple[str, ...] = (KIND_DASHBOARDS, KIND_FOLDERS)
        else:
            self._wildcard_kinds = (KIND_FOLDERS,)

    def build(self, action: str, scopes: Iterable[str]) -> Clause:
        """Return the condition under which action is granted on a row of the target class."""
        classified = [classify_scope(scope) for scope in scopes]
        if any(self._grants_all(scope) for scope in classified):
            logger.debug("%s on %s rows: wildcard", action, self.target.value)
            return ALWAYS_TRUE

        dashboard_uids = _uids(classified, KIND_DASHBOARDS)
        folder_uids = _uids(classified, KIND_FOLDERS)
        logger.debug(
            "%s on %s rows: %d dashboard uids, %d folder uids",
            action,
            self.target.value,
            len(dashboard_uids),
            len(folder_uids),
        )

        clauses: list[Clause] = []
        if self.target == HitType.DASHBOARD:
            if dashboard_uids:
                clauses.append(in_clause("dashboard.uid", dashboard_uids))
            if folder_uids:
                clauses.append(self.expander.match("dashboard.folder_uid", folder_uids))
        elif folder_uids:
            clauses.append(self.expander.match("dashboard.uid", folder_uids))

        if not clauses:
            return ALWAYS_FALSE
        return join_clauses(clauses, "OR")

    def _grants_all(self, scope: Scope) -> bool:
        if isinstance(scope, AllWildcard):
            return True
        if isinstance(scope, KindWildcard):
            return any(scope.covers(kind) for kind in self._wildcard_kinds)
        return False


def _uids(scopes: list[Scope], kind: str) -> list[str]:
    """Distinct uids of kind among resource scopes, sorted for stable output."""
    uids = set()
    for scope in scopes:
        if isinstance(scope, ResourceScope):
            uid = scope.uid_for(kind)
            if uid is not None:
                uids.add(uid)
    return sorted(uids)
