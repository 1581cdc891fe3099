from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from returns.pipeline import flow
from returns.pointfree import bind, map_
from returns.result import Failure, Result, Success

from order_desk.core.domain.model.errors import (
    InvalidAmount,
    OrderError,
    ValidationError,
)
from order_desk.core.domain.model.order import CustomerName, LineItem, Order, OrderId
from order_desk.core.domain.service.get_order_service import to_order_view
from order_desk.core.ports.inbound.add_order import AddOrderCommand, AddOrderUseCase
from order_desk.core.ports.inbound.get_order import OrderView
from order_desk.core.ports.outbound.events import EventPublisher, OrderAdded
from order_desk.core.ports.outbound.orders import OrderRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddOrderDeps:
    orders: OrderRepository
    events: EventPublisher
    reject_negative_amounts: bool = False


@dataclass(frozen=True)
class AddOrderService(AddOrderUseCase):
    deps: AddOrderDeps

    def add_order(self, command: AddOrderCommand) -> Result[OrderView, OrderError]:
        result = flow(
            command,
            self._validate,
            bind(_build_order),
            bind(self._persist),
            map_(self._publish),
            map_(to_order_view),
        )
        if isinstance(result, Failure):
            logger.info("add_order rejected: %s", result.failure())
        return result

    def _validate(self, cmd: AddOrderCommand) -> Result[AddOrderCommand, OrderError]:
        return _validate_command(
            cmd, reject_negative_amounts=self.deps.reject_negative_amounts
        )

    def _persist(self, order: Order) -> Result[Order, OrderError]:
        return self.deps.orders.add(order).map(lambda _: order)

    def _publish(self, order: Order) -> Order:
        self.deps.events.publish(OrderAdded(order.order_id))
        return order


def _validate_command(
    cmd: AddOrderCommand, reject_negative_amounts: bool
) -> Result[AddOrderCommand, OrderError]:
    if not cmd.order_id.strip():
        return Failure(ValidationError(message="order_id is required"))

    for i, ln in enumerate(cmd.lines):
        if not math.isfinite(ln.amount):
            return Failure(
                InvalidAmount(
                    message=f"lines[{i}].amount must be a finite number",
                    amount=ln.amount,
                )
            )
        if reject_negative_amounts and ln.amount < 0:
            return Failure(
                InvalidAmount(message=f"lines[{i}].amount must be >= 0", amount=ln.amount)
            )

    return Success(cmd)


def _build_order(cmd: AddOrderCommand) -> Result[Order, OrderError]:
    items: Tuple[LineItem, ...] = tuple(
        LineItem(product_name=ln.product_name, amount=float(ln.amount))
        for ln in cmd.lines
    )
    return Success(
        Order(
            order_id=OrderId(cmd.order_id),
            customer=CustomerName(cmd.customer),
            items=items,
        )
    )
