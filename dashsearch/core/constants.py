"""Core constants: permission actions, scope prefixes and SQL literals.

Single source of truth for the action and scope vocabulary shared by the
permission filter and the search layer.
"""

# Actions
ACTION_DASHBOARDS_READ = "dashboards:read"
ACTION_DASHBOARDS_WRITE = "dashboards:write"
ACTION_DASHBOARDS_CREATE = "dashboards:create"
ACTION_FOLDERS_READ = "folders:read"
ACTION_ALERTING_RULE_READ = "alert.rules:read"
ACTION_ALERTING_RULE_CREATE = "alert.rules:create"

# Scope vocabulary: "<kind>:<attribute>:<identifier>"
SCOPE_SEP = ":"
SCOPE_WILDCARD = "*"
SCOPE_ATTRIBUTE_UID = "uid"
KIND_DASHBOARDS = "dashboards"
KIND_FOLDERS = "folders"

SCOPE_DASHBOARDS_PREFIX = "dashboards:uid:"
SCOPE_FOLDERS_PREFIX = "folders:uid:"
SCOPE_DASHBOARDS_ALL = "dashboards:uid:*"
SCOPE_FOLDERS_ALL = "folders:uid:*"

# SQL literals used when a condition needs no parameters
SQL_TRUE = "1 = 1"
SQL_FALSE = "1 = 0"

# Name prefix for recursive folder queries (RecQry0, RecQry1, ...)
RECURSIVE_QUERY_PREFIX = "RecQry"
