"""SQLAlchemy adapter – paginator.

:func:`paginate` takes a filtered, unordered ``select()`` and:

1. resolves the order plan (allow-list checked, default field appended);
2. counts every row the filter matches, without ordering or limits;
3. derives a second, bounded statement with ORDER BY, LIMIT and OFFSET.

``Select`` objects are immutable, so the count and the bounded statement
are built from independent copies and the caller's statement is left as
it was. The two reads are not a snapshot: concurrent writes between the
count and the fetch can make ``total`` disagree with a full page walk
unless the caller runs both inside one transaction.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_db.adapters.sqlalchemy.errors import translate_store_errors
from inventory_db.application.pagination import (
    OrderDirection,
    OrderPlan,
    Page,
    PageRequest,
    build_order_plan,
)
from inventory_db.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True, eq=False)
class SortConfig:
    """Per-entity ordering configuration.

    ``fields`` maps each public sort name to the column it orders by; its
    keys are the allow-list. ``joins`` lists relationships to outer-join
    when a sort field lives on a related table.
    """

    fields: Mapping[str, Any]
    default_field: str
    joins: Mapping[str, Sequence[Any]] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.default_field not in self.fields:
            raise ValueError(f"default field '{self.default_field}' must be one of the sort fields")
        unknown = set(self.joins) - set(self.fields)
        if unknown:
            raise ValueError(f"joins declared for unknown sort fields: {sorted(unknown)}")
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "joins", MappingProxyType({k: tuple(v) for k, v in self.joins.items()}))

    @property
    def allowed_fields(self) -> frozenset[str]:
        return frozenset(self.fields)

    def plan(self, page: PageRequest) -> OrderPlan:
        return build_order_plan(page.order_by, self.allowed_fields, self.default_field)

    def apply(self, statement: Select[Any], plan: OrderPlan) -> Select[Any]:
        """Add the joins and ORDER BY terms required by *plan*."""
        joined: list[Any] = []
        for spec in plan:
            for target in self.joins.get(spec.field, ()):
                if any(target is seen for seen in joined):
                    continue
                statement = statement.outerjoin(target)
                joined.append(target)
        clauses = []
        for spec in plan:
            column = self.fields[spec.field]
            clauses.append(column.desc() if spec.direction is OrderDirection.DESC else column.asc())
        return statement.order_by(*clauses)


@dataclasses.dataclass(frozen=True)
class BoundedQuery:
    """Ordered, limited statement ready to execute, plus the filter's total."""

    statement: Select[Any]
    total: int
    offset: int
    limit: int
    order_plan: OrderPlan


def count_statement(statement: Select[Any]) -> Select[Any]:
    """``SELECT count(*)`` over *statement* with ordering and limits stripped."""
    unbounded = statement.order_by(None).limit(None).offset(None)
    return select(func.count()).select_from(unbounded.subquery())


async def paginate(
    session: AsyncSession,
    statement: Select[Any],
    page: PageRequest | None,
    sorting: SortConfig,
) -> BoundedQuery:
    """Count the rows matched by *statement* and return the bounded query.

    Raises :class:`~inventory_db.application.pagination.InvalidSortFieldError`
    before touching the store when an order field is not allowed, and
    :class:`~inventory_db.kernel.errors.StoreError` when the count fails.
    """
    page = page or PageRequest()
    plan = sorting.plan(page)
    offset = page.resolved_offset
    limit = page.resolved_limit

    with translate_store_errors("count"):
        total = (await session.execute(count_statement(statement))).scalar_one()
    _log.debug("pagination.count", total=total)

    bounded = sorting.apply(statement, plan).limit(limit).offset(offset)
    _log.debug(
        "pagination.bounded",
        offset=offset,
        limit=limit,
        order_by=[str(spec) for spec in plan],
    )
    return BoundedQuery(statement=bounded, total=total, offset=offset, limit=limit, order_plan=plan)


async def fetch_page(
    session: AsyncSession,
    statement: Select[Any],
    page: PageRequest | None,
    sorting: SortConfig,
    *,
    options: Sequence[Any] = (),
) -> Page[Any]:
    """Run :func:`paginate` then execute the bounded statement.

    *options* (e.g. ``selectinload``) are attached to the bounded statement
    only; the count never sees them.
    """
    bounded = await paginate(session, statement, page, sorting)
    fetch = bounded.statement.options(*options) if options else bounded.statement
    with translate_store_errors("fetch"):
        result = await session.execute(fetch)
        items = list(result.scalars().all())
    return Page(items=items, total=bounded.total, offset=bounded.offset, limit=bounded.limit)


class Paginator(Generic[T]):
    """Binds a session and a :class:`SortConfig` for repeated list queries."""

    def __init__(self, session: AsyncSession, sorting: SortConfig) -> None:
        self._session = session
        self._sorting = sorting

    @property
    def sorting(self) -> SortConfig:
        return self._sorting

    async def paginate(self, statement: Select[Any], page: PageRequest | None = None) -> BoundedQuery:
        return await paginate(self._session, statement, page, self._sorting)

    async def fetch(
        self,
        statement: Select[Any],
        page: PageRequest | None = None,
        *,
        options: Sequence[Any] = (),
    ) -> Page[T]:
        return await fetch_page(self._session, statement, page, self._sorting, options=options)


__all__ = ["BoundedQuery", "Paginator", "SortConfig", "count_statement", "fetch_page", "paginate"]
