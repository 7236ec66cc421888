"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   │   ├── InvalidSortFieldError   (application/pagination/errors.py)
    │   │   ├── InvalidPageParamsError  (application/pagination/errors.py)
    │   │   └── InvalidRelationError    (adapters/sqlalchemy/errors.py)
    │   └── NotFoundError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (config/validation)
    └── InfrastructureError  (infrastructure.py)
        └── StoreError
"""

from inventory_db.kernel.errors.application import ApplicationError
from inventory_db.kernel.errors.base import BaseError
from inventory_db.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    ValidationError,
)
from inventory_db.kernel.errors.infrastructure import InfrastructureError, StoreError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
]
