"""Catalog – Site model, filter and DAO."""
from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Sequence
from typing import Any

from sqlalchemy import Select, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from inventory_db.adapters.sqlalchemy import (
    SoftDeleteMixin,
    SortConfig,
    SqlAlchemyDAOBase,
    TimestampMixin,
    where_in,
)
from inventory_db.catalog.base import Base

SITE_STATUS_PENDING = "Pending"
SITE_STATUS_REGISTERED = "Registered"
SITE_STATUS_ERROR = "Error"


class Site(TimestampMixin, SoftDeleteMixin, Base):
    """A datacenter location operated by an infrastructure provider."""

    __tablename__ = "site"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    org: Mapped[str] = mapped_column(String(256), nullable=False, index=True)
    infrastructure_provider_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(64), nullable=False, default=SITE_STATUS_PENDING)
    created_by: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)


SITE_SORTING = SortConfig(
    fields={
        "name": Site.name,
        "status": Site.status,
        "created": Site.created,
        "updated": Site.updated,
    },
    default_field="created",
)


@dataclasses.dataclass
class SiteCreateInput:
    name: str
    org: str
    infrastructure_provider_id: uuid.UUID
    created_by: uuid.UUID
    description: str | None = None
    status: str = SITE_STATUS_PENDING


@dataclasses.dataclass
class SiteFilter:
    site_ids: Sequence[uuid.UUID] | None = None
    names: Sequence[str] | None = None
    orgs: Sequence[str] | None = None
    infrastructure_provider_ids: Sequence[uuid.UUID] | None = None
    statuses: Sequence[str] | None = None
    search_query: str | None = None

    def apply(self, statement: Select[Any]) -> Select[Any]:
        statement = where_in(statement, Site.id, self.site_ids)
        statement = where_in(statement, Site.name, self.names)
        statement = where_in(statement, Site.org, self.orgs)
        statement = where_in(statement, Site.infrastructure_provider_id, self.infrastructure_provider_ids)
        return where_in(statement, Site.status, self.statuses)


class SiteDAO(SqlAlchemyDAOBase[Site]):
    model = Site
    sorting = SITE_SORTING
    search_columns = (Site.name, Site.description, Site.status)
    clearable = frozenset({"description"})

    async def create(self, data: SiteCreateInput) -> Site:
        site = Site(
            id=uuid.uuid4(),
            name=data.name,
            description=data.description,
            org=data.org,
            infrastructure_provider_id=data.infrastructure_provider_id,
            status=data.status,
            created_by=data.created_by,
        )
        return await self._insert(site)

    async def update(
        self,
        site_id: uuid.UUID,
        *,
        name: str | None = None,
        description: str | None = None,
        status: str | None = None,
    ) -> Site:
        return await self._update(site_id, self._changes(name=name, description=description, status=status))


__all__ = [
    "SITE_SORTING",
    "SITE_STATUS_ERROR",
    "SITE_STATUS_PENDING",
    "SITE_STATUS_REGISTERED",
    "Site",
    "SiteCreateInput",
    "SiteDAO",
    "SiteFilter",
]
