"""Required actions per permission level and query type."""

from __future__ import annotations

from dataclasses import dataclass

from dashsearch.core.constants import (
    ACTION_ALERTING_RULE_CREATE,
    ACTION_ALERTING_RULE_READ,
    ACTION_DASHBOARDS_CREATE,
    ACTION_DASHBOARDS_READ,
    ACTION_DASHBOARDS_WRITE,
    ACTION_FOLDERS_READ,
)
from dashsearch.domain.enums import PermissionLevel, QueryType


@dataclass(frozen=True)
class ActionRequirement:
    """Actions that must all hold, for dashboard rows and for folder rows.

    An empty tuple excludes that row class from the result entirely.
    """

    dashboard_actions: tuple[str, ...] = ()
    folder_actions: tuple[str, ...] = ()


def required_actions(level: PermissionLevel, query_type: QueryType) -> ActionRequirement:
    """Return the action requirement for a level and query type.

    VIEW reads; EDIT and ADMIN additionally need dashboards:write on
    dashboards and dashboards:create on folders. Alert folders need
    folders:read and alert.rules:read on the same folder.
    """
    dashboard_actions = [ACTION_DASHBOARDS_READ]
    folder_actions = [ACTION_FOLDERS_READ]
    if level.needs_edit:
        dashboard_actions.append(ACTION_DASHBOARDS_WRITE)
        folder_actions.append(ACTION_DASHBOARDS_CREATE)

    if query_type == QueryType.DASHBOARD:
        return ActionRequirement(dashboard_actions=tuple(dashboard_actions))
    if query_type == QueryType.FOLDER:
        return ActionRequirement(folder_actions=tuple(folder_actions))
    if query_type == QueryType.ALERT_FOLDER:
        alert_actions = [ACTION_FOLDERS_READ, ACTION_ALERTING_RULE_READ]
        if level.needs_edit:
            alert_actions.append(ACTION_ALERTING_RULE_CREATE)
        return ActionRequirement(folder_actions=tuple(alert_actions))
    return ActionRequirement(
        dashboard_actions=tuple(dashboard_actions),
        folder_actions=tuple(folder_actions),
    )
