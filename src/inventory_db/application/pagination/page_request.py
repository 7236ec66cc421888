"""Application pagination – PageRequest, OrderBy, OrderDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum

from inventory_db.application.pagination.errors import InvalidPageParamsError

DEFAULT_LIMIT = 20
"""Page size used whenever a request does not carry a limit."""


class OrderDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: "str | OrderDirection | None") -> "OrderDirection":
        """Parse ``asc``/``desc`` case-insensitively; ``None`` means ASC."""
        if value is None:
            return cls.ASC
        if isinstance(value, OrderDirection):
            return value
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise InvalidPageParamsError("order_direction", value, "expected 'ASC' or 'DESC'") from None


@dataclasses.dataclass(frozen=True)
class OrderBy:
    """Single order-by criterion.

    The field is a public sort name; it is checked against an entity
    allow-list by :func:`~inventory_db.application.pagination.order.validate_order_by`.
    """

    field: str
    direction: OrderDirection = OrderDirection.ASC

    @classmethod
    def parse(cls, field: str, direction: str | None = None) -> "OrderBy":
        return cls(field=field.strip(), direction=OrderDirection.parse(direction))

    def __str__(self) -> str:
        return f"{self.field} {self.direction.value}"


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters.

    ``offset`` and ``limit`` may be left unset; :attr:`resolved_offset` and
    :attr:`resolved_limit` give the values the paginator applies.
    """

    offset: int | None = None
    limit: int | None = None
    order_by: tuple[OrderBy, ...] = ()

    def __post_init__(self) -> None:
        for name in ("offset", "limit"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise InvalidPageParamsError(name, value, "must be an integer")
        if self.offset is not None and self.offset < 0:
            raise InvalidPageParamsError("offset", self.offset, "must be >= 0")
        if self.limit is not None and self.limit < 1:
            raise InvalidPageParamsError("limit", self.limit, "must be >= 1")
        if isinstance(self.order_by, OrderBy):
            object.__setattr__(self, "order_by", (self.order_by,))
        elif not isinstance(self.order_by, tuple):
            object.__setattr__(self, "order_by", tuple(self.order_by))

    @property
    def resolved_offset(self) -> int:
        return 0 if self.offset is None else self.offset

    @property
    def resolved_limit(self) -> int:
        return DEFAULT_LIMIT if self.limit is None else self.limit


__all__ = ["DEFAULT_LIMIT", "OrderBy", "OrderDirection", "PageRequest"]
