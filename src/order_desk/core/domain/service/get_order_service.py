from __future__ import annotations

from dataclasses import dataclass

from returns.result import Failure, Result

from order_desk.core.domain.model.errors import OrderError, ValidationError
from order_desk.core.domain.model.order import Order, OrderId
from order_desk.core.ports.inbound.get_order import (
    GetOrderQuery,
    GetOrderUseCase,
    OrderLineView,
    OrderView,
)
from order_desk.core.ports.outbound.orders import OrderRepository


@dataclass(frozen=True)
class GetOrderDeps:
    orders: OrderRepository


@dataclass(frozen=True)
class GetOrderService(GetOrderUseCase):
    deps: GetOrderDeps

    def get_order(self, query: GetOrderQuery) -> Result[OrderView, OrderError]:
        if not query.order_id.strip():
            return Failure(ValidationError(message="order_id is required"))

        return self.deps.orders.get(OrderId(query.order_id)).map(to_order_view)


def to_order_view(order: Order) -> OrderView:
    lines = tuple(
        OrderLineView(product_name=li.product_name, amount=li.amount)
        for li in order.items
    )
    return OrderView(
        order_id=order.order_id,
        customer=order.customer,
        total=order.total(),
        lines=lines,
    )
