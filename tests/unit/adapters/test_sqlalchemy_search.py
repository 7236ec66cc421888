"""Unit tests for free-text search predicates.

PostgreSQL output is checked by compiling against the ``postgresql``
dialect; matching behaviour runs on in-memory SQLite.
"""
from __future__ import annotations

import asyncio
from typing import Any

import pytest
from sqlalchemy import Integer, String, select
from sqlalchemy.dialects import postgresql
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from inventory_db.adapters.sqlalchemy import TokenMatch, search_predicate


class Base(DeclarativeBase):
    pass


class Device(Base):
    __tablename__ = "devices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(String(200), nullable=True)


_DEVICES = [
    ("rack(01)", None),
    ("Rack 02", "spare capacity"),
    ("switch", "top of rack"),
    ("100%_pure", None),
]


async def _search(text: str | None) -> list[str]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        async with factory() as session:
            session.add_all(Device(name=name, description=desc) for name, desc in _DEVICES)
            await session.flush()
            statement = select(Device).order_by(Device.id)
            predicate = search_predicate(text, [Device.name, Device.description])
            if predicate is not None:
                statement = statement.where(predicate)
            result = await session.execute(statement)
            return [device.name for device in result.scalars().all()]
    finally:
        await engine.dispose()


def _compile_pg(clause: Any) -> str:
    return str(clause.compile(dialect=postgresql.dialect()))


class TestSearchPredicate:
    @pytest.mark.parametrize("text", [None, "", "   ", "&|!"])
    def test_nothing_to_search_returns_none(self, text: str | None) -> None:
        assert search_predicate(text, [Device.name]) is None

    def test_requires_columns(self) -> None:
        with pytest.raises(ValueError):
            search_predicate("rack", [])

    def test_postgresql_uses_text_search(self) -> None:
        sql = _compile_pg(search_predicate("Rack 01", [Device.name, Device.description]))
        assert "to_tsvector" in sql
        assert "@@" in sql
        assert "to_tsquery" in sql
        assert "REGCONFIG" in sql
        assert "ILIKE" in sql

    def test_postgresql_language_is_bound(self) -> None:
        clause = search_predicate("rack", [Device.name], language="simple")
        compiled = clause.compile(dialect=postgresql.dialect())  # type: ignore[union-attr]
        assert "simple" in compiled.params.values()
        assert "rack" in compiled.params.values()


class TestTokenMatch:
    def test_requires_terms(self) -> None:
        with pytest.raises(ValueError):
            TokenMatch([Device.name], [])

    def test_requires_columns(self) -> None:
        with pytest.raises(ValueError):
            TokenMatch([], ["rack"])

    def test_default_dialect_uses_like(self) -> None:
        sql = str(TokenMatch([Device.name], ["rack", "01"]).compile())
        assert sql.count("LIKE") == 2
        assert "lower" in sql


class TestSearchMatching:
    def test_empty_string_equals_no_search(self) -> None:
        assert asyncio.run(_search("")) == asyncio.run(_search(None))
        assert len(asyncio.run(_search(None))) == len(_DEVICES)

    def test_every_term_must_match(self) -> None:
        assert asyncio.run(_search("rack spare")) == ["Rack 02"]

    def test_terms_match_across_columns(self) -> None:
        assert asyncio.run(_search("switch top")) == ["switch"]

    def test_case_insensitive(self) -> None:
        assert asyncio.run(_search("SWITCH")) == ["switch"]

    def test_partial_word_with_punctuation_uses_substring_fallback(self) -> None:
        assert asyncio.run(_search("rack(0")) == ["rack(01)"]

    def test_like_wildcards_are_literal(self) -> None:
        assert asyncio.run(_search("0%_p")) == ["100%_pure"]
