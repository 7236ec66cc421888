"""Unit tests for Site, Allocation and VPC DAOs – related-table sorting and filters."""
from __future__ import annotations

import asyncio
import uuid

from inventory_db.application.pagination import OrderBy, OrderDirection, PageRequest
from inventory_db.catalog import (
    SITE_RELATION,
    TENANT_RELATION,
    AllocationCreateInput,
    AllocationDAO,
    AllocationFilter,
    Site,
    SiteCreateInput,
    SiteDAO,
    SiteFilter,
    Tenant,
    TenantCreateInput,
    TenantDAO,
    VpcCreateInput,
    VpcDAO,
    VpcFilter,
)
from inventory_db.catalog.allocation import ALLOCATION_STATUS_REGISTERED
from inventory_db.catalog.vpc import VPC_STATUS_ERROR, VPC_STATUS_PENDING, VPC_STATUS_READY, VPC_STATUSES
from inventory_db.kernel.time import FrozenClock

from dao_support import CREATOR, catalog_session

PROVIDER = uuid.UUID("00000000-0000-0000-0000-0000000000aa")


async def _site(session, clock: FrozenClock, name: str, **kwargs) -> Site:  # type: ignore[no-untyped-def]
    site = await SiteDAO(session, clock=clock).create(
        SiteCreateInput(name=name, org="acme", infrastructure_provider_id=PROVIDER, created_by=CREATOR, **kwargs)
    )
    clock.advance(seconds=1)
    return site


async def _tenant(session, clock: FrozenClock, org: str, display: str) -> Tenant:  # type: ignore[no-untyped-def]
    tenant = await TenantDAO(session, clock=clock).create(
        TenantCreateInput(org=org, org_display_name=display, created_by=CREATOR)
    )
    clock.advance(seconds=1)
    return tenant


class TestSiteDAO:
    def test_search_over_description(self, clock: FrozenClock) -> None:
        async def _run() -> None:
            async with catalog_session() as session:
                await _site(session, clock, "san-jose", description="West coast DC")
                await _site(session, clock, "ashburn", description="East coast DC")
                page = await SiteDAO(session, clock=clock).get_all(SiteFilter(search_query="west"))
                assert [s.name for s in page.items] == ["san-jose"]

        asyncio.run(_run())

    def test_update_status(self, clock: FrozenClock) -> None:
        async def _run() -> None:
            async with catalog_session() as session:
                site = await _site(session, clock, "san-jose")
                updated = await SiteDAO(session, clock=clock).update(site.id, status="Registered")
                assert updated.status == "Registered"
                assert updated.updated > updated.created

        asyncio.run(_run())


class TestAllocationDAO:
    def test_sort_by_site_name(self, clock: FrozenClock) -> None:
        async def _run() -> None:
            async with catalog_session() as session:
                tenant = await _tenant(session, clock, "acme", "Acme")
                bravo = await _site(session, clock, "bravo-site")
                alpha = await _site(session, clock, "alpha-site")
                dao = AllocationDAO(session, clock=clock)
                await dao.create(
                    AllocationCreateInput(name="first", tenant_id=tenant.id, site_id=bravo.id, created_by=CREATOR)
                )
                clock.advance(seconds=1)
                await dao.create(
                    AllocationCreateInput(name="second", tenant_id=tenant.id, site_id=alpha.id, created_by=CREATOR)
                )

                asc = await dao.get_all(page=PageRequest(order_by=(OrderBy("site_name"),)))
                assert [a.name for a in asc.items] == ["second", "first"]
                assert asc.total == 2
                desc = await dao.get_all(
                    page=PageRequest(order_by=(OrderBy("site_name", OrderDirection.DESC),))
                )
                assert [a.name for a in desc.items] == ["first", "second"]

        asyncio.run(_run())

    def test_sort_by_tenant_display_name_with_relations(self, clock: FrozenClock) -> None:
        async def _run() -> None:
            async with catalog_session() as session:
                zeta = await _tenant(session, clock, "zeta", "Zeta Labs")
                acme = await _tenant(session, clock, "acme", "Acme Corp")
                site = await _site(session, clock, "san-jose")
                dao = AllocationDAO(session, clock=clock)
                for name, tenant in (("z-alloc", zeta), ("a-alloc", acme)):
                    await dao.create(
                        AllocationCreateInput(name=name, tenant_id=tenant.id, site_id=site.id, created_by=CREATOR)
                    )
                    clock.advance(seconds=1)

                page = await dao.get_all(
                    page=PageRequest(order_by=(OrderBy("tenant_org_display_name"),)),
                    include_relations=[TENANT_RELATION, SITE_RELATION],
                )
                assert [a.name for a in page.items] == ["a-alloc", "z-alloc"]
                assert page.items[0].tenant.org == "acme"
                assert page.items[0].site.name == "san-jose"

        asyncio.run(_run())

    def test_filter_by_site_and_status(self, clock: FrozenClock) -> None:
        async def _run() -> None:
            async with catalog_session() as session:
                tenant = await _tenant(session, clock, "acme", "Acme")
                one = await _site(session, clock, "one")
                two = await _site(session, clock, "two")
                dao = AllocationDAO(session, clock=clock)
                await dao.create(
                    AllocationCreateInput(name="a", tenant_id=tenant.id, site_id=one.id, created_by=CREATOR)
                )
                await dao.create(
                    AllocationCreateInput(
                        name="b",
                        tenant_id=tenant.id,
                        site_id=two.id,
                        created_by=CREATOR,
                        status=ALLOCATION_STATUS_REGISTERED,
                    )
                )
                by_site = await dao.get_all(AllocationFilter(site_ids=[one.id]))
                assert [a.name for a in by_site.items] == ["a"]
                by_status = await dao.get_all(AllocationFilter(statuses=[ALLOCATION_STATUS_REGISTERED]))
                assert [a.name for a in by_status.items] == ["b"]

        asyncio.run(_run())

    def test_clear_description_and_count(self, clock: FrozenClock) -> None:
        async def _run() -> None:
            async with catalog_session() as session:
                tenant = await _tenant(session, clock, "acme", "Acme")
                site = await _site(session, clock, "san-jose")
                dao = AllocationDAO(session, clock=clock)
                allocation = await dao.create(
                    AllocationCreateInput(
                        name="gpu-pool",
                        tenant_id=tenant.id,
                        site_id=site.id,
                        created_by=CREATOR,
                        description="reserved capacity",
                    )
                )
                assert await dao.get_count(AllocationFilter(site_ids=[site.id])) == 1
                assert await dao.get_count(AllocationFilter(statuses=[ALLOCATION_STATUS_REGISTERED])) == 0
                clock.advance(seconds=5)
                cleared = await dao.clear(allocation.id, ["description"])
                assert cleared.description is None
                assert cleared.updated == clock.now()

        asyncio.run(_run())


class TestVpcDAO:
    def test_create_filter_and_delete(self, clock: FrozenClock) -> None:
        async def _run() -> None:
            async with catalog_session() as session:
                tenant = await _tenant(session, clock, "acme", "Acme")
                site = await _site(session, clock, "san-jose")
                dao = VpcDAO(session, clock=clock)
                vpc = await dao.create(
                    VpcCreateInput(
                        name="prod-vpc",
                        org="acme",
                        tenant_id=tenant.id,
                        site_id=site.id,
                        created_by=CREATOR,
                        description="production network",
                    )
                )
                assert vpc.created == vpc.updated == clock.now()
                found = await dao.get_all(VpcFilter(site_ids=[site.id], search_query="production"))
                assert [v.name for v in found.items] == ["prod-vpc"]

                await dao.delete(vpc.id)
                assert (await dao.get_all(VpcFilter(site_ids=[site.id]))).total == 0

        asyncio.run(_run())

    def test_get_count_by_status(self, clock: FrozenClock) -> None:
        async def _run() -> None:
            async with catalog_session() as session:
                tenant = await _tenant(session, clock, "acme", "Acme")
                one = await _site(session, clock, "one")
                two = await _site(session, clock, "two")
                dao = VpcDAO(session, clock=clock)
                empty = await dao.get_count_by_status()
                assert empty == {"total": 0, **{status: 0 for status in VPC_STATUSES}}

                rows = [
                    ("a", one, VPC_STATUS_READY),
                    ("b", one, VPC_STATUS_READY),
                    ("c", two, VPC_STATUS_ERROR),
                    ("d", two, VPC_STATUS_PENDING),
                ]
                created = []
                for name, site, status in rows:
                    created.append(
                        await dao.create(
                            VpcCreateInput(
                                name=name,
                                org="acme",
                                tenant_id=tenant.id,
                                site_id=site.id,
                                created_by=CREATOR,
                                status=status,
                            )
                        )
                    )
                await dao.delete(created[-1].id)

                counts = await dao.get_count_by_status()
                assert counts["total"] == 3
                assert counts[VPC_STATUS_READY] == 2
                assert counts[VPC_STATUS_ERROR] == 1
                assert counts[VPC_STATUS_PENDING] == 0
                assert set(counts) == {"total", *VPC_STATUSES}

                by_site = await dao.get_count_by_status(VpcFilter(site_ids=[two.id]))
                assert by_site["total"] == 1
                assert by_site[VPC_STATUS_ERROR] == 1
                assert by_site[VPC_STATUS_READY] == 0

        asyncio.run(_run())

    def test_clear_description(self, clock: FrozenClock) -> None:
        async def _run() -> None:
            async with catalog_session() as session:
                tenant = await _tenant(session, clock, "acme", "Acme")
                site = await _site(session, clock, "san-jose")
                dao = VpcDAO(session, clock=clock)
                vpc = await dao.create(
                    VpcCreateInput(
                        name="prod-vpc",
                        org="acme",
                        tenant_id=tenant.id,
                        site_id=site.id,
                        created_by=CREATOR,
                        description="production network",
                    )
                )
                assert await dao.get_count(VpcFilter(search_query="production")) == 1
                clock.advance(seconds=30)
                cleared = await dao.clear(vpc.id, ["description"])
                assert cleared.description is None
                assert cleared.updated == clock.now()
                assert cleared.updated > cleared.created
                assert await dao.get_count(VpcFilter(search_query="production")) == 0

        asyncio.run(_run())
