"""Application-layer errors: cross-cutting concerns outside the data contract."""

from __future__ import annotations

from inventory_db.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern (configuration, wiring)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
