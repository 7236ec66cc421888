"""Catalog – SSHKey model, filter and DAO."""
from __future__ import annotations

import dataclasses
import datetime
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
    UtcDateTime,
    where_in,
)
from inventory_db.catalog.base import TENANT_RELATION, Base
from inventory_db.catalog.tenant import Tenant


class SSHKey(TimestampMixin, SoftDeleteMixin, Base):
    """A tenant user's public SSH key."""

    __tablename__ = "ssh_key"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    org: Mapped[str] = mapped_column(String(256), nullable=False, index=True)
    tenant_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("tenant.id"), nullable=False, index=True)
    tenant: Mapped[Tenant] = relationship()
    public_key: Mapped[str] = mapped_column(Text, nullable=False)
    fingerprint: Mapped[str | None] = mapped_column(String(256), nullable=True)
    expires: Mapped[datetime.datetime | None] = mapped_column(UtcDateTime(), nullable=True)
    created_by: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)


SSHKEY_SORTING = SortConfig(
    fields={
        "name": SSHKey.name,
        "org": SSHKey.org,
        "tenant_id": SSHKey.tenant_id,
        "created": SSHKey.created,
        "updated": SSHKey.updated,
    },
    default_field="created",
)


@dataclasses.dataclass
class SSHKeyCreateInput:
    name: str
    tenant_org: str
    tenant_id: uuid.UUID
    public_key: str
    created_by: uuid.UUID
    fingerprint: str | None = None
    expires: datetime.datetime | None = None
    ssh_key_id: uuid.UUID | None = None


@dataclasses.dataclass
class SSHKeyFilter:
    ssh_key_ids: Sequence[uuid.UUID] | None = None
    names: Sequence[str] | None = None
    tenant_orgs: Sequence[str] | None = None
    tenant_ids: Sequence[uuid.UUID] | None = None
    fingerprints: Sequence[str] | None = None
    expires_before: datetime.datetime | None = None
    search_query: str | None = None

    def apply(self, statement: Select[Any]) -> Select[Any]:
        statement = where_in(statement, SSHKey.id, self.ssh_key_ids)
        statement = where_in(statement, SSHKey.name, self.names)
        statement = where_in(statement, SSHKey.org, self.tenant_orgs)
        statement = where_in(statement, SSHKey.tenant_id, self.tenant_ids)
        statement = where_in(statement, SSHKey.fingerprint, self.fingerprints)
        if self.expires_before is not None:
            statement = statement.where(SSHKey.expires < self.expires_before)
        return statement


class SSHKeyDAO(SqlAlchemyDAOBase[SSHKey]):
    model = SSHKey
    sorting = SSHKEY_SORTING
    relations = {TENANT_RELATION: SSHKey.tenant}
    search_columns = (SSHKey.name,)
    clearable = frozenset({"fingerprint", "expires"})

    async def create(self, data: SSHKeyCreateInput) -> SSHKey:
        key = SSHKey(
            id=data.ssh_key_id or uuid.uuid4(),
            name=data.name,
            org=data.tenant_org,
            tenant_id=data.tenant_id,
            public_key=data.public_key,
            fingerprint=data.fingerprint,
            expires=data.expires,
            created_by=data.created_by,
        )
        return await self._insert(key)

    async def update(
        self,
        ssh_key_id: uuid.UUID,
        *,
        name: str | None = None,
        tenant_org: str | None = None,
        public_key: str | None = None,
        fingerprint: str | None = None,
        expires: datetime.datetime | None = None,
    ) -> SSHKey:
        values = self._changes(
            name=name,
            org=tenant_org,
            public_key=public_key,
            fingerprint=fingerprint,
            expires=expires,
        )
        return await self._update(ssh_key_id, values)

    async def delete(self, id: Any) -> None:
        """Clear the public key material, then soft-delete the row."""
        key = await self._get_live(id)
        if key is None:
            return
        key.public_key = ""
        key.updated = self._clock.now()
        await self._soft_delete(key)


__all__ = ["SSHKEY_SORTING", "SSHKey", "SSHKeyCreateInput", "SSHKeyDAO", "SSHKeyFilter"]
