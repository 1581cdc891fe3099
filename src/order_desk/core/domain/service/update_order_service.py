from __future__ import annotations

import logging
from dataclasses import dataclass

from returns.result import Failure, Result

from order_desk.core.domain.model.errors import OrderError
from order_desk.core.domain.model.order import CustomerName, Order, OrderId
from order_desk.core.domain.service.get_order_service import to_order_view
from order_desk.core.ports.inbound.get_order import OrderView
from order_desk.core.ports.inbound.update_order import (
    UpdateOrderCommand,
    UpdateOrderUseCase,
)
from order_desk.core.ports.outbound.events import EventPublisher, OrderUpdated
from order_desk.core.ports.outbound.orders import OrderRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateOrderDeps:
    orders: OrderRepository
    events: EventPublisher


@dataclass(frozen=True)
class UpdateOrderService(UpdateOrderUseCase):
    """Changes the customer of an existing order. Items and id stay as they are."""

    deps: UpdateOrderDeps

    def update_order(
        self, command: UpdateOrderCommand
    ) -> Result[OrderView, OrderError]:
        result = (
            self.deps.orders.rename_customer(
                OrderId(command.order_id), CustomerName(command.customer)
            )
            .map(self._publish)
            .map(to_order_view)
        )
        if isinstance(result, Failure):
            logger.info("update_order rejected: %s", result.failure())
        return result

    def _publish(self, order: Order) -> Order:
        self.deps.events.publish(OrderUpdated(order.order_id, order.customer))
        return order
