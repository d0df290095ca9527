"""Helpers for executing "?"-parameterised SQL through sqlalchemy.text()."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import TextClause, text


def bind_positional(sql: str, params: Sequence[Any]) -> tuple[TextClause, dict[str, Any]]:
    """Rewrite "?" placeholders as :p0, :p1, ... and return the statement with its bind dict.

    The SQL must contain no literal "?" outside placeholders; all values
    arrive as parameters.

    Raises:
        ValueError: If the placeholder count does not match len(params).
    """
    pieces = sql.split("?")
    if len(pieces) - 1 != len(params):
        raise ValueError(
            f"SQL has {len(pieces) - 1} placeholders but {len(params)} parameters were given"
        )
    out = [pieces[0]]
    for i, piece in enumerate(pieces[1:]):
        out.append(f":p{i}")
        out.append(piece)
    return text("".join(out)), {f"p{i}": value for i, value in enumerate(params)}


def escape_like(value: str) -> str:
    """Escape LIKE wildcards (% and _) and the escape character so value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
