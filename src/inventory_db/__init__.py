"""
inventory_db – Data-access layer for the inventory/allocation service.

Import path convention::

    from inventory_db.application.pagination import PageRequest, OrderBy
    from inventory_db.adapters.sqlalchemy import fetch_page, search_predicate
    from inventory_db.catalog import SSHKeyDAO, SSHKeyFilter
    from inventory_db.kernel.errors import InvalidSortFieldError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
