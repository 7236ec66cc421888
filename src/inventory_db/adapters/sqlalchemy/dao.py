"""SQLAlchemy adapter – SqlAlchemyDAOBase.

Entity DAOs subclass this and declare four class attributes:

* ``model`` – the mapped class (must use ``TimestampMixin`` and
  ``SoftDeleteMixin``);
* ``sorting`` – its :class:`~inventory_db.adapters.sqlalchemy.paginator.SortConfig`;
* ``relations`` – public relation name → relationship attribute;
* ``search_columns`` – columns searched by ``filter.search_query``.
* ``clearable`` – nullable fields that :meth:`SqlAlchemyDAOBase.clear` may reset to ``NULL``.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Self, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inventory_db.adapters.sqlalchemy.errors import (
    InvalidClearFieldError,
    InvalidRelationError,
    translate_store_errors,
)
from inventory_db.adapters.sqlalchemy.filters import QueryFilter
from inventory_db.adapters.sqlalchemy.paginator import Paginator, SortConfig, count_statement
from inventory_db.adapters.sqlalchemy.search import DEFAULT_SEARCH_LANGUAGE, search_predicate
from inventory_db.application.pagination import Page, PageRequest
from inventory_db.kernel.errors import NotFoundError
from inventory_db.kernel.time import Clock, SystemClock
from inventory_db.observability.logging import get_logger

if TYPE_CHECKING:
    from inventory_db.config.settings import DatabaseSettings

TModel = TypeVar("TModel")

_log = get_logger(__name__)


class SqlAlchemyDAOBase(Generic[TModel]):
    """Generic async DAO: lookups, paginated listing, explicit timestamping, soft delete."""

    model: ClassVar[type[Any]]
    sorting: ClassVar[SortConfig]
    relations: ClassVar[Mapping[str, Any]] = {}
    search_columns: ClassVar[Sequence[Any]] = ()
    clearable: ClassVar[frozenset[str]] = frozenset()

    def __init__(
        self,
        session: AsyncSession,
        *,
        clock: Clock | None = None,
        search_language: str = DEFAULT_SEARCH_LANGUAGE,
    ) -> None:
        self._session = session
        self._clock: Clock = clock or SystemClock()
        self._search_language = search_language
        self._paginator: Paginator[TModel] = Paginator(session, self.sorting)

    @classmethod
    def from_settings(
        cls,
        session: AsyncSession,
        settings: DatabaseSettings,
        *,
        clock: Clock | None = None,
    ) -> Self:
        """Build the DAO with the search language configured in *settings*."""
        return cls(session, clock=clock, search_language=settings.search_language)

    @property
    def search_language(self) -> str:
        return self._search_language

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    # ------------------------------------------------------------------
    # Query building
    # ------------------------------------------------------------------

    def _select(self) -> Select[Any]:
        return select(self.model).where(self.model.not_deleted_filter())

    def _loader_options(self, include_relations: Iterable[str]) -> list[Any]:
        options = []
        for name in include_relations:
            if name not in self.relations:
                raise InvalidRelationError(self.entity_name, name, self.relations)
            options.append(selectinload(self.relations[name]))
        return options

    def _filtered(self, filter: QueryFilter | None) -> Select[Any]:
        statement = self._select()
        if filter is None:
            return statement
        statement = filter.apply(statement)
        if filter.search_query is not None and self.search_columns:
            predicate = search_predicate(
                filter.search_query, self.search_columns, language=self._search_language
            )
            if predicate is not None:
                statement = statement.where(predicate)
        return statement

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def _get_live(self, id: Any, include_relations: Iterable[str] = ()) -> TModel | None:
        options = self._loader_options(include_relations)
        statement = self._select().where(self.model.id == id)
        if options:
            statement = statement.options(*options)
        with translate_store_errors("get_by_id", entity=self.entity_name):
            result = await self._session.execute(statement)
            return result.scalar_one_or_none()

    async def get_by_id(self, id: Any, include_relations: Iterable[str] = ()) -> TModel:
        """Return the live row with *id*; raise :class:`NotFoundError` otherwise."""
        obj = await self._get_live(id, include_relations)
        if obj is None:
            raise NotFoundError(self.entity_name, id)
        return obj

    async def get_all(
        self,
        filter: QueryFilter | None = None,
        page: PageRequest | None = None,
        include_relations: Iterable[str] = (),
    ) -> Page[TModel]:
        """Return one page of live rows matching *filter* and the total match count.

        With no order-by in *page* rows come back by the entity's default
        field, ascending.
        """
        options = self._loader_options(include_relations)
        statement = self._filtered(filter)
        return await self._paginator.fetch(statement, page, options=options)

    async def get_count(self, filter: QueryFilter | None = None) -> int:
        """Count live rows matching *filter* (search included) without fetching them."""
        with translate_store_errors("count", entity=self.entity_name):
            result = await self._session.execute(count_statement(self._filtered(filter)))
            return result.scalar_one()

    async def _count_by(self, column: Any, filter: QueryFilter | None = None) -> dict[Any, int]:
        """Count live rows matching *filter*, grouped by *column*."""
        grouped = self._filtered(filter).subquery()
        key = grouped.c[column.key]
        statement = select(key, func.count()).group_by(key)
        with translate_store_errors("count", entity=self.entity_name):
            result = await self._session.execute(statement)
            return {value: count for value, count in result.all()}

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @staticmethod
    def _changes(**values: Any) -> dict[str, Any]:
        """Keep only the fields the caller actually set (non-``None``)."""
        return {key: value for key, value in values.items() if value is not None}

    async def _flush(self, operation: str) -> None:
        with translate_store_errors(operation, entity=self.entity_name):
            await self._session.flush()

    async def _insert(self, obj: TModel) -> TModel:
        now = self._clock.now()
        obj.created = now  # type: ignore[attr-defined]
        obj.updated = now  # type: ignore[attr-defined]
        self._session.add(obj)
        await self._flush("create")
        _log.debug("dao.create", entity=self.entity_name, id=str(obj.id))  # type: ignore[attr-defined]
        return obj

    async def _update(self, id: Any, values: Mapping[str, Any]) -> TModel:
        obj = await self.get_by_id(id)
        if values:
            for key, value in values.items():
                setattr(obj, key, value)
            obj.updated = self._clock.now()  # type: ignore[attr-defined]
            await self._flush("update")
            _log.debug("dao.update", entity=self.entity_name, id=str(id), fields=sorted(values))
        return obj

    async def clear(self, id: Any, fields: Iterable[str]) -> TModel:
        """Set each of *fields* to ``NULL`` and stamp ``updated``.

        Every field must be listed in ``clearable``; nothing is written
        otherwise. An empty *fields* returns the row unchanged.
        """
        names = list(dict.fromkeys(fields))
        for name in names:
            if name not in self.clearable:
                raise InvalidClearFieldError(self.entity_name, name, self.clearable)
        obj = await self.get_by_id(id)
        if names:
            for name in names:
                setattr(obj, name, None)
            obj.updated = self._clock.now()  # type: ignore[attr-defined]
            await self._flush("clear")
            _log.debug("dao.clear", entity=self.entity_name, id=str(id), fields=names)
        return obj

    async def _soft_delete(self, obj: TModel) -> None:
        obj.deleted = self._clock.now()  # type: ignore[attr-defined]
        await self._flush("delete")
        _log.debug("dao.delete", entity=self.entity_name, id=str(obj.id))  # type: ignore[attr-defined]

    async def delete(self, id: Any) -> None:
        """Soft-delete the row with *id*. A missing row is not an error."""
        obj = await self._get_live(id)
        if obj is None:
            return
        await self._soft_delete(obj)


__all__ = ["SqlAlchemyDAOBase"]
