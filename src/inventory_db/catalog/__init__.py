"""Catalog – entity models, filters and DAOs built on the SQLAlchemy adapter."""
from inventory_db.catalog.allocation import (
    ALLOCATION_SORTING,
    Allocation,
    AllocationCreateInput,
    AllocationDAO,
    AllocationFilter,
)
from inventory_db.catalog.base import SITE_RELATION, TENANT_RELATION, Base
from inventory_db.catalog.site import SITE_SORTING, Site, SiteCreateInput, SiteDAO, SiteFilter
from inventory_db.catalog.sshkey import SSHKEY_SORTING, SSHKey, SSHKeyCreateInput, SSHKeyDAO, SSHKeyFilter
from inventory_db.catalog.tenant import TENANT_SORTING, Tenant, TenantCreateInput, TenantDAO, TenantFilter
from inventory_db.catalog.vpc import VPC_SORTING, Vpc, VpcCreateInput, VpcDAO, VpcFilter

__all__ = [
    "ALLOCATION_SORTING",
    "Allocation",
    "AllocationCreateInput",
    "AllocationDAO",
    "AllocationFilter",
    "Base",
    "SITE_RELATION",
    "SITE_SORTING",
    "SSHKEY_SORTING",
    "SSHKey",
    "SSHKeyCreateInput",
    "SSHKeyDAO",
    "SSHKeyFilter",
    "Site",
    "SiteCreateInput",
    "SiteDAO",
    "SiteFilter",
    "TENANT_RELATION",
    "TENANT_SORTING",
    "Tenant",
    "TenantCreateInput",
    "TenantDAO",
    "TenantFilter",
    "VPC_SORTING",
    "Vpc",
    "VpcCreateInput",
    "VpcDAO",
    "VpcFilter",
]
