"""Catalog – VPC model, filter and DAO."""
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

VPC_STATUS_PENDING = "Pending"
VPC_STATUS_PROVISIONING = "Provisioning"
VPC_STATUS_READY = "Ready"
VPC_STATUS_ERROR = "Error"
VPC_STATUS_DELETING = "Deleting"

VPC_STATUSES = (
    VPC_STATUS_PENDING,
    VPC_STATUS_PROVISIONING,
    VPC_STATUS_READY,
    VPC_STATUS_ERROR,
    VPC_STATUS_DELETING,
)


class Vpc(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "vpc"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    org: Mapped[str] = mapped_column(String(256), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(64), nullable=False, default=VPC_STATUS_PENDING)
    tenant_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("tenant.id"), nullable=False, index=True)
    tenant: Mapped[Tenant] = relationship()
    site_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("site.id"), nullable=False, index=True)
    site: Mapped[Site] = relationship()
    created_by: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)


VPC_SORTING = SortConfig(
    fields={
        "name": Vpc.name,
        "status": Vpc.status,
        "created": Vpc.created,
        "updated": Vpc.updated,
    },
    default_field="created",
)


@dataclasses.dataclass
class VpcCreateInput:
    name: str
    org: str
    tenant_id: uuid.UUID
    site_id: uuid.UUID
    created_by: uuid.UUID
    description: str | None = None
    status: str = VPC_STATUS_PENDING


@dataclasses.dataclass
class VpcFilter:
    vpc_ids: Sequence[uuid.UUID] | None = None
    names: Sequence[str] | None = None
    orgs: Sequence[str] | None = None
    tenant_ids: Sequence[uuid.UUID] | None = None
    site_ids: Sequence[uuid.UUID] | None = None
    statuses: Sequence[str] | None = None
    search_query: str | None = None

    def apply(self, statement: Select[Any]) -> Select[Any]:
        statement = where_in(statement, Vpc.id, self.vpc_ids)
        statement = where_in(statement, Vpc.name, self.names)
        statement = where_in(statement, Vpc.org, self.orgs)
        statement = where_in(statement, Vpc.tenant_id, self.tenant_ids)
        statement = where_in(statement, Vpc.site_id, self.site_ids)
        return where_in(statement, Vpc.status, self.statuses)


class VpcDAO(SqlAlchemyDAOBase[Vpc]):
    model = Vpc
    sorting = VPC_SORTING
    relations = {TENANT_RELATION: Vpc.tenant, SITE_RELATION: Vpc.site}
    search_columns = (Vpc.name, Vpc.description, Vpc.status)
    clearable = frozenset({"description"})

    async def create(self, data: VpcCreateInput) -> Vpc:
        vpc = Vpc(
            id=uuid.uuid4(),
            name=data.name,
            description=data.description,
            org=data.org,
            status=data.status,
            tenant_id=data.tenant_id,
            site_id=data.site_id,
            created_by=data.created_by,
        )
        return await self._insert(vpc)

    async def update(
        self,
        vpc_id: uuid.UUID,
        *,
        name: str | None = None,
        description: str | None = None,
        status: str | None = None,
    ) -> Vpc:
        return await self._update(vpc_id, self._changes(name=name, description=description, status=status))

    async def get_count_by_status(self, filter: VpcFilter | None = None) -> dict[str, int]:
        """Live VPC counts per status plus a ``total`` key.

        Every known status is present, with 0 when no VPC has it.
        """
        counts: dict[str, int] = {"total": 0, **{status: 0 for status in VPC_STATUSES}}
        for status, count in (await self._count_by(Vpc.status, filter)).items():
            counts[status] = counts.get(status, 0) + count
            counts["total"] += count
        return counts


__all__ = [
    "VPC_SORTING",
    "VPC_STATUSES",
    "VPC_STATUS_DELETING",
    "VPC_STATUS_ERROR",
    "VPC_STATUS_PENDING",
    "VPC_STATUS_PROVISIONING",
    "VPC_STATUS_READY",
    "Vpc",
    "VpcCreateInput",
    "VpcDAO",
    "VpcFilter",
]
