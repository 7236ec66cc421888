"""Catalog – Tenant model, filter and DAO."""
from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Sequence
from typing import Any

from sqlalchemy import Select, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from inventory_db.adapters.sqlalchemy import (
    SoftDeleteMixin,
    SortConfig,
    SqlAlchemyDAOBase,
    TimestampMixin,
    where_in,
)
from inventory_db.catalog.base import Base


class Tenant(TimestampMixin, SoftDeleteMixin, Base):
    """An organization consuming allocated site capacity."""

    __tablename__ = "tenant"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    org: Mapped[str] = mapped_column(String(256), nullable=False, index=True)
    org_display_name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    created_by: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)


TENANT_SORTING = SortConfig(
    fields={
        "org": Tenant.org,
        "org_display_name": Tenant.org_display_name,
        "created": Tenant.created,
        "updated": Tenant.updated,
    },
    default_field="created",
)


@dataclasses.dataclass
class TenantCreateInput:
    org: str
    created_by: uuid.UUID
    org_display_name: str | None = None
    tenant_id: uuid.UUID | None = None


@dataclasses.dataclass
class TenantFilter:
    tenant_ids: Sequence[uuid.UUID] | None = None
    orgs: Sequence[str] | None = None
    search_query: str | None = None

    def apply(self, statement: Select[Any]) -> Select[Any]:
        statement = where_in(statement, Tenant.id, self.tenant_ids)
        return where_in(statement, Tenant.org, self.orgs)


class TenantDAO(SqlAlchemyDAOBase[Tenant]):
    model = Tenant
    sorting = TENANT_SORTING
    search_columns = (Tenant.org, Tenant.org_display_name)
    clearable = frozenset({"org_display_name"})

    async def create(self, data: TenantCreateInput) -> Tenant:
        tenant = Tenant(
            id=data.tenant_id or uuid.uuid4(),
            org=data.org,
            org_display_name=data.org_display_name,
            created_by=data.created_by,
        )
        return await self._insert(tenant)

    async def update(
        self,
        tenant_id: uuid.UUID,
        *,
        org: str | None = None,
        org_display_name: str | None = None,
    ) -> Tenant:
        return await self._update(tenant_id, self._changes(org=org, org_display_name=org_display_name))


__all__ = ["TENANT_SORTING", "Tenant", "TenantCreateInput", "TenantDAO", "TenantFilter"]
