"""Pagination errors – rejected sort fields and page parameters."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from inventory_db.kernel.errors import ValidationError


class InvalidSortFieldError(ValidationError):
    """The requested order-by field is not in the entity's allow-list."""

    default_code = "invalid_sort_field"
    context_attrs = ("field", "allowed_fields")

    def __init__(self, field: str, allowed_fields: Iterable[str], **kwargs: Any) -> None:
        allowed = sorted(allowed_fields)
        super().__init__(
            f"Field '{field}' is not a valid order by field",
            errors=[{"field": "order_by", "value": field, "allowed": allowed}],
            **kwargs,
        )
        self.field = field
        self.allowed_fields = tuple(allowed)


class InvalidPageParamsError(ValidationError):
    """Offset, limit or order direction is out of range."""

    default_code = "invalid_page_params"
    context_attrs = ("param", "value", "reason")

    def __init__(self, param: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid page parameter '{param}' = {value!r}: {reason}",
            errors=[{"field": param, "value": value, "reason": reason}],
            **kwargs,
        )
        self.param = param
        self.value = value
        self.reason = reason


__all__ = ["InvalidPageParamsError", "InvalidSortFieldError"]
