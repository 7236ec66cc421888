"""Infrastructure errors: failures of the backing store."""

from __future__ import annotations

from typing import Any

from inventory_db.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a caller input problem."""

    default_code = "infrastructure_error"


class StoreError(InfrastructureError):
    """A read or write against the relational store failed.

    The driver exception is kept untouched as ``cause``; nothing is retried.
    """

    default_code = "store_error"
    context_attrs = ("operation",)

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Store operation '{operation}' failed", **kwargs)
        self.operation = operation


__all__ = ["InfrastructureError", "StoreError"]
