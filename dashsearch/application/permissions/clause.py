"""SQL clause fragments with positional ("?") parameters."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from dashsearch.core.constants import SQL_FALSE, SQL_TRUE


@dataclass(frozen=True)
class Clause:
    """A SQL fragment and the values bound to its "?" placeholders, in order."""

    sql: str
    params: tuple[Any, ...] = field(default_factory=tuple)


ALWAYS_TRUE = Clause(SQL_TRUE)
ALWAYS_FALSE = Clause(SQL_FALSE)


def placeholders(count: int) -> str:
    """Return "?, ?, ..." with count placeholders."""
    return ", ".join("?" * count)


def in_clause(column: str, values: Sequence[Any]) -> Clause:
    """Return "column IN (?, ...)"; an empty value list never matches."""
    if not values:
        return ALWAYS_FALSE
    return Clause(f"{column} IN ({placeholders(len(values))})", tuple(values))


def join_clauses(clauses: Sequence[Clause], operator: str) -> Clause:
    """Join clauses with AND/OR, each wrapped in parentheses when there is more than one."""
    if len(clauses) == 1:
        return clauses[0]
    sql = f" {operator} ".join(f"({c.sql})" for c in clauses)
    params: tuple[Any, ...] = ()
    for c in clauses:
        params += c.params
    return Clause(sql, params)
