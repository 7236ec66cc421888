"""SQLAlchemy adapter – paginator, search predicates, DAO base, mixins."""
from inventory_db.adapters.sqlalchemy.dao import SqlAlchemyDAOBase
from inventory_db.adapters.sqlalchemy.errors import (
    InvalidClearFieldError,
    InvalidRelationError,
    translate_store_errors,
)
from inventory_db.adapters.sqlalchemy.filters import QueryFilter, where_in
from inventory_db.adapters.sqlalchemy.mixins import SoftDeleteMixin, TimestampMixin, UtcDateTime
from inventory_db.adapters.sqlalchemy.paginator import (
    BoundedQuery,
    Paginator,
    SortConfig,
    count_statement,
    fetch_page,
    paginate,
)
from inventory_db.adapters.sqlalchemy.search import DEFAULT_SEARCH_LANGUAGE, TokenMatch, search_predicate
from inventory_db.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = [
    "BoundedQuery",
    "DEFAULT_SEARCH_LANGUAGE",
    "InvalidClearFieldError",
    "InvalidRelationError",
    "Paginator",
    "QueryFilter",
    "SoftDeleteMixin",
    "SortConfig",
    "SqlAlchemyDAOBase",
    "SqlAlchemySessionFactory",
    "TimestampMixin",
    "TokenMatch",
    "UtcDateTime",
    "count_statement",
    "fetch_page",
    "paginate",
    "search_predicate",
    "translate_store_errors",
    "where_in",
]
