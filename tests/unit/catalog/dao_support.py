"""Shared helpers for catalog DAO tests (in-memory SQLite via aiosqlite)."""
from __future__ import annotations

import contextlib
import uuid
from collections.abc import AsyncIterator
from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from inventory_db.adapters.sqlalchemy import SqlAlchemySessionFactory
from inventory_db.catalog import Base

START = datetime(2026, 3, 1, 9, 30, tzinfo=UTC)
CREATOR = uuid.UUID("00000000-0000-0000-0000-000000000001")


@contextlib.asynccontextmanager
async def catalog_session() -> AsyncIterator[AsyncSession]:
    factory = SqlAlchemySessionFactory("sqlite+aiosqlite:///:memory:")
    async with factory.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        async with factory() as session:
            yield session
    finally:
        await factory.dispose()
