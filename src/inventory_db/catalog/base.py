"""Catalog – declarative base and relation names shared by entity modules."""
from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase

TENANT_RELATION = "Tenant"
SITE_RELATION = "Site"


class Base(DeclarativeBase):
    pass


__all__ = ["Base", "SITE_RELATION", "TENANT_RELATION"]
