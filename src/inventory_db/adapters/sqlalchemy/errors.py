"""SQLAlchemy adapter – store error translation and relation errors."""
from __future__ import annotations

import contextlib
from collections.abc import Iterable, Iterator
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from inventory_db.kernel.errors import StoreError, ValidationError
from inventory_db.observability.logging import get_logger

_log = get_logger(__name__)


class InvalidRelationError(ValidationError):
    """A requested relation name is not loadable for the entity."""

    default_code = "invalid_relation"
    context_attrs = ("entity", "relation", "allowed")

    def __init__(self, entity: str, relation: str, allowed: Iterable[str], **kwargs: Any) -> None:
        allowed_sorted = sorted(allowed)
        super().__init__(
            f"Relation '{relation}' is not valid for {entity}",
            errors=[{"field": "include_relation", "value": relation, "allowed": allowed_sorted}],
            **kwargs,
        )
        self.entity = entity
        self.relation = relation
        self.allowed = tuple(allowed_sorted)


class InvalidClearFieldError(ValidationError):
    """A field named for clearing is not nullable on the entity."""

    default_code = "invalid_clear_field"
    context_attrs = ("entity", "field", "allowed")

    def __init__(self, entity: str, field: str, allowed: Iterable[str], **kwargs: Any) -> None:
        allowed_sorted = sorted(allowed)
        super().__init__(
            f"Field '{field}' cannot be cleared on {entity}",
            errors=[{"field": "clear", "value": field, "allowed": allowed_sorted}],
            **kwargs,
        )
        self.entity = entity
        self.field = field
        self.allowed = tuple(allowed_sorted)


@contextlib.contextmanager
def translate_store_errors(operation: str, **log_fields: Any) -> Iterator[None]:
    """Re-raise any :class:`SQLAlchemyError` raised inside the block as :class:`StoreError`.

    The driver exception stays reachable through ``cause``/``__cause__``.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        _log.warning("store.error", operation=operation, error=repr(exc), **log_fields)
        raise StoreError(operation, cause=exc) from exc


__all__ = ["InvalidClearFieldError", "InvalidRelationError", "translate_store_errors"]
