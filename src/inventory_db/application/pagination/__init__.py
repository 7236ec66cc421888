"""Application pagination – page request, order plan and page primitives."""
from inventory_db.application.pagination.errors import InvalidPageParamsError, InvalidSortFieldError
from inventory_db.application.pagination.order import OrderPlan, build_order_plan, validate_order_by
from inventory_db.application.pagination.page import Page
from inventory_db.application.pagination.page_request import (
    DEFAULT_LIMIT,
    OrderBy,
    OrderDirection,
    PageRequest,
)

__all__ = [
    "DEFAULT_LIMIT",
    "InvalidPageParamsError",
    "InvalidSortFieldError",
    "OrderBy",
    "OrderDirection",
    "OrderPlan",
    "Page",
    "PageRequest",
    "build_order_plan",
    "validate_order_by",
]
