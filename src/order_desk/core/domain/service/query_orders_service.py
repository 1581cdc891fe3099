from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from returns.pipeline import flow
from returns.pointfree import bind, map_
from returns.result import Failure, Result, Success

from order_desk.core.domain.model.errors import OrderError, ValidationError
from order_desk.core.domain.model.order import Order
from order_desk.core.domain.service.get_order_service import to_order_view
from order_desk.core.ports.inbound.get_order import OrderView
from order_desk.core.ports.inbound.query_orders import (
    QueryOrdersQuery,
    QueryOrdersUseCase,
)
from order_desk.core.ports.outbound.orders import OrderRepository


@dataclass(frozen=True)
class QueryOrdersDeps:
    orders: OrderRepository


@dataclass(frozen=True)
class QueryOrdersService(QueryOrdersUseCase):
    """
    Read-only view over the store: keyword / amount-range filtering, then
    ascending order by total. Calling it twice on the same store state gives
    the same sequence.
    """

    deps: QueryOrdersDeps

    def query_orders(
        self, query: QueryOrdersQuery
    ) -> Result[Sequence[OrderView], OrderError]:
        return flow(
            query,
            _validate_query,
            bind(self._load_and_select),
            map_(_to_views),
        )

    def _load_and_select(
        self, query: QueryOrdersQuery
    ) -> Result[Tuple[Order, ...], OrderError]:
        return self.deps.orders.all().map(lambda orders: select_orders(orders, query))


def select_orders(orders: Iterable[Order], query: QueryOrdersQuery) -> Tuple[Order, ...]:
    selected = list(orders)

    if query.keyword:
        keyword = query.keyword
        selected = [o for o in selected if o.matches_keyword(keyword)]
    if query.min_amount is not None:
        lo = query.min_amount
        selected = [o for o in selected if o.total() >= lo]
    if query.max_amount is not None:
        hi = query.max_amount
        selected = [o for o in selected if o.total() <= hi]

    # sorted() is stable: equal totals keep store order
    return tuple(sorted(selected, key=lambda o: o.total()))


def _validate_query(query: QueryOrdersQuery) -> Result[QueryOrdersQuery, OrderError]:
    for name, bound in (("min_amount", query.min_amount), ("max_amount", query.max_amount)):
        if bound is not None and not math.isfinite(bound):
            return Failure(ValidationError(message=f"{name} must be a finite number"))
    return Success(query)


def _to_views(orders: Sequence[Order]) -> Sequence[OrderView]:
    return tuple(to_order_view(o) for o in orders)
