"""Unit tests for the QueryFilter protocol and where-clause helpers."""
from __future__ import annotations

from sqlalchemy import select

from inventory_db.adapters.sqlalchemy import QueryFilter, where_in
from inventory_db.catalog import AllocationFilter, SiteFilter, SSHKeyFilter, Tenant, TenantFilter, VpcFilter


class TestWhereIn:
    def test_none_leaves_statement_untouched(self) -> None:
        statement = select(Tenant)
        assert where_in(statement, Tenant.org, None) is statement

    def test_single_value_renders_equality(self) -> None:
        sql = str(where_in(select(Tenant), Tenant.org, ["acme"]))
        assert "tenant.org = :org_1" in sql

    def test_many_values_render_in(self) -> None:
        sql = str(where_in(select(Tenant), Tenant.org, ["acme", "globex"]))
        assert "tenant.org IN" in sql

    def test_empty_sequence_matches_nothing(self) -> None:
        sql = str(where_in(select(Tenant), Tenant.org, []))
        assert "false" in sql.lower() or "0 = 1" in sql


class TestQueryFilterProtocol:
    def test_entity_filters_satisfy_protocol(self) -> None:
        for filter_cls in (TenantFilter, SiteFilter, SSHKeyFilter, AllocationFilter, VpcFilter):
            assert isinstance(filter_cls(), QueryFilter)

    def test_empty_filter_adds_no_criteria(self) -> None:
        statement = select(Tenant)
        assert str(TenantFilter().apply(statement)) == str(statement)
