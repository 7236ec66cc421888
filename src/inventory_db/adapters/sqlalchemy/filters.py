"""SQLAlchemy adapter – QueryFilter protocol and where-clause helpers.

Each entity filter is a small dataclass that knows how to narrow a
``select()`` of its model; DAOs only ever call :meth:`QueryFilter.apply`.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from sqlalchemy import Select, false


@runtime_checkable
class QueryFilter(Protocol):
    """Capability implemented by every entity filter."""

    search_query: str | None

    def apply(self, statement: Select[Any]) -> Select[Any]: ...


def where_in(statement: Select[Any], column: Any, values: Sequence[Any] | None) -> Select[Any]:
    """Narrow *statement* to rows whose *column* is one of *values*.

    ``None`` leaves the statement untouched, a single value renders ``=``,
    several render ``IN``, and an empty sequence matches nothing.
    """
    if values is None:
        return statement
    if len(values) == 0:
        return statement.where(false())
    if len(values) == 1:
        return statement.where(column == values[0])
    return statement.where(column.in_(list(values)))


__all__ = ["QueryFilter", "where_in"]
