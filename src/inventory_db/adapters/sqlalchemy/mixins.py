"""SQLAlchemy ORM mixins – TimestampMixin, SoftDeleteMixin, UtcDateTime."""
from __future__ import annotations

import datetime
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


class UtcDateTime(TypeDecorator):
    """Timezone-aware ``DateTime`` that always loads values as UTC.

    Backends without a native timezone type (SQLite) hand back naive values;
    those are tagged as UTC on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> Any:
        if isinstance(value, datetime.datetime) and value.tzinfo is not None:
            return value.astimezone(datetime.UTC)
        return value

    def process_result_value(self, value: Any, dialect: Any) -> Any:
        if isinstance(value, datetime.datetime) and value.tzinfo is None:
            return value.replace(tzinfo=datetime.UTC)
        return value


class TimestampMixin:
    """Adds ``created`` and ``updated`` timestamp columns.

    Values are written by the DAO ``create``/``update`` methods from their
    injected :class:`~inventory_db.kernel.time.Clock`; there are no ORM
    event hooks touching them.
    """

    created: Mapped[datetime.datetime] = mapped_column(UtcDateTime(), nullable=False, index=True)
    updated: Mapped[datetime.datetime] = mapped_column(UtcDateTime(), nullable=False)


class SoftDeleteMixin:
    """Adds a ``deleted`` nullable timestamp column for soft-deletion.

    ``deleted`` is ``NULL`` for live rows. DAO reads always add
    :meth:`not_deleted_filter`::

        stmt = select(SSHKey).where(SSHKey.not_deleted_filter())
    """

    deleted: Mapped[datetime.datetime | None] = mapped_column(
        UtcDateTime(),
        nullable=True,
        default=None,
        index=True,
    )

    @classmethod
    def not_deleted_filter(cls) -> Any:
        """Return a column expression ``<cls>.deleted IS NULL``."""
        return cls.deleted.is_(None)  # type: ignore[attr-defined]

    @property
    def is_deleted(self) -> bool:
        """``True`` if this row has been soft-deleted."""
        return self.deleted is not None  # type: ignore[attr-defined]


__all__ = ["SoftDeleteMixin", "TimestampMixin", "UtcDateTime"]
