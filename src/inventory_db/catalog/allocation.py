"""Catalog – Allocation model, filter and DAO.

Allocations can be ordered by the name of their site or the display name of
their tenant; those sort fields outer-join the related table only when they
appear in the order plan.
"""
from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Sequence
from typing import Any

from sqlalchemy import ForeignKey, Select, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_db.adapters.sqlalchemy import (
    SoftDeleteMixin,
    SortConfig,
    SqlAlchemyDAOBase,
    TimestampMixin,
    where_in,
)
from inventory_db.catalog.base import SITE_RELATION, TENANT_RELATION, Base
from inventory_db.catalog.site import Site
from inventory_db.catalog.tenant import Tenant

ALLOCATION_STATUS_PENDING = "Pending"
ALLOCATION_STATUS_REGISTERED = "Registered"
ALLOCATION_STATUS_ERROR = "Error"
ALLOCATION_STATUS_DELETING = "Deleting"

ALLOCATION_STATUSES = frozenset(
    {
        ALLOCATION_STATUS_PENDING,
        ALLOCATION_STATUS_REGISTERED,
        ALLOCATION_STATUS_ERROR,
        ALLOCATION_STATUS_DELETING,
    }
)


class Allocation(TimestampMixin, SoftDeleteMixin, Base):
    """A portion of a site's capacity allocated to a tenant."""

    __tablename__ = "allocation"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(64), nullable=False, default=ALLOCATION_STATUS_PENDING)
    tenant_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("tenant.id"), nullable=False, index=True)
    tenant: Mapped[Tenant] = relationship()
    site_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("site.id"), nullable=False, index=True)
    site: Mapped[Site] = relationship()
    created_by: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)


ALLOCATION_SORTING = SortConfig(
    fields={
        "name": Allocation.name,
        "status": Allocation.status,
        "created": Allocation.created,
        "updated": Allocation.updated,
        "site_name": Site.name,
        "tenant_org_display_name": Tenant.org_display_name,
    },
    default_field="created",
    joins={
        "site_name": (Allocation.site,),
        "tenant_org_display_name": (Allocation.tenant,),
    },
)


@dataclasses.dataclass
class AllocationCreateInput:
    name: str
    tenant_id: uuid.UUID
    site_id: uuid.UUID
    created_by: uuid.UUID
    description: str | None = None
    status: str = ALLOCATION_STATUS_PENDING


@dataclasses.dataclass
class AllocationFilter:
    allocation_ids: Sequence[uuid.UUID] | None = None
    names: Sequence[str] | None = None
    tenant_ids: Sequence[uuid.UUID] | None = None
    site_ids: Sequence[uuid.UUID] | None = None
    statuses: Sequence[str] | None = None
    search_query: str | None = None

    def apply(self, statement: Select[Any]) -> Select[Any]:
        statement = where_in(statement, Allocation.id, self.allocation_ids)
        statement = where_in(statement, Allocation.name, self.names)
        statement = where_in(statement, Allocation.tenant_id, self.tenant_ids)
        statement = where_in(statement, Allocation.site_id, self.site_ids)
        return where_in(statement, Allocation.status, self.statuses)


class AllocationDAO(SqlAlchemyDAOBase[Allocation]):
    model = Allocation
    sorting = ALLOCATION_SORTING
    relations = {TENANT_RELATION: Allocation.tenant, SITE_RELATION: Allocation.site}
    search_columns = (Allocation.name, Allocation.description, Allocation.status)
    clearable = frozenset({"description"})

    async def create(self, data: AllocationCreateInput) -> Allocation:
        allocation = Allocation(
            id=uuid.uuid4(),
            name=data.name,
            description=data.description,
            status=data.status,
            tenant_id=data.tenant_id,
            site_id=data.site_id,
            created_by=data.created_by,
        )
        return await self._insert(allocation)

    async def update(
        self,
        allocation_id: uuid.UUID,
        *,
        name: str | None = None,
        description: str | None = None,
        status: str | None = None,
    ) -> Allocation:
        return await self._update(
            allocation_id, self._changes(name=name, description=description, status=status)
        )


__all__ = [
    "ALLOCATION_SORTING",
    "ALLOCATION_STATUSES",
    "ALLOCATION_STATUS_DELETING",
    "ALLOCATION_STATUS_ERROR",
    "ALLOCATION_STATUS_PENDING",
    "ALLOCATION_STATUS_REGISTERED",
    "Allocation",
    "AllocationCreateInput",
    "AllocationDAO",
    "AllocationFilter",
]
