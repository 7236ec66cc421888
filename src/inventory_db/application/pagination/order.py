"""Application pagination – allow-list validation and order plans.

An order plan is the final ORDER BY sequence for a list query. It always
contains the entity's default field so that rows sharing a value in the
requested fields still come back in a repeatable order under LIMIT/OFFSET.
The default field is last unless the caller ordered by it explicitly, in
which case it keeps the caller's position and direction.
The guarantee is only as strong as the uniqueness of that default field
(typically a creation timestamp).
"""
from __future__ import annotations

from collections.abc import Collection, Iterable

from inventory_db.application.pagination.errors import InvalidSortFieldError
from inventory_db.application.pagination.page_request import OrderBy, OrderDirection

OrderPlan = tuple[OrderBy, ...]


def validate_order_by(order_by: OrderBy, allowed_fields: Collection[str]) -> OrderBy:
    """Return *order_by* unchanged or raise :class:`InvalidSortFieldError`."""
    if order_by.field not in allowed_fields:
        raise InvalidSortFieldError(order_by.field, allowed_fields)
    return order_by


def build_order_plan(
    order_by: OrderBy | Iterable[OrderBy] | None,
    allowed_fields: Collection[str],
    default_field: str,
) -> OrderPlan:
    """Compose the caller's criteria with the default tie-break field.

    * caller criteria come first, in the order given (a repeated field keeps
      its first occurrence);
    * ``default_field`` is appended ascending unless the caller already
      orders by it; a caller-placed default keeps its position, so with
      several criteria it need not be the last entry;
    * with no criteria the plan is ``(OrderBy(default_field, ASC),)``.

    Every caller field is validated before the plan is returned, so an
    invalid field fails the whole request.
    """
    if order_by is None:
        requested: tuple[OrderBy, ...] = ()
    elif isinstance(order_by, OrderBy):
        requested = (order_by,)
    else:
        requested = tuple(order_by)

    plan: list[OrderBy] = []
    seen: set[str] = set()
    for spec in requested:
        validate_order_by(spec, allowed_fields)
        if spec.field in seen:
            continue
        seen.add(spec.field)
        plan.append(spec)

    if default_field not in seen:
        plan.append(OrderBy(default_field, OrderDirection.ASC))
    return tuple(plan)


__all__ = ["OrderPlan", "build_order_plan", "validate_order_by"]
