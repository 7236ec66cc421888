"""Application pagination – Page result container."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass
class Page(Generic[T]):
    """One page of rows plus the count of every row matching the filter.

    ``total`` ignores ``offset``/``limit``; an offset past the end yields an
    empty ``items`` list with the same ``total``.
    """

    items: list[T]
    total: int
    offset: int
    limit: int

    @property
    def has_next(self) -> bool:
        return self.offset + len(self.items) < self.total

    @property
    def has_previous(self) -> bool:
        return self.offset > 0

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each item transformed by *fn*."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            offset=self.offset,
            limit=self.limit,
        )


__all__ = ["Page"]
