from __future__ import annotations

import logging
from dataclasses import dataclass

from returns.result import Failure, Result

from order_desk.core.domain.model.errors import OrderError
from order_desk.core.domain.model.order import Order, OrderId
from order_desk.core.ports.inbound.delete_order import (
    DeleteOrderCommand,
    DeleteOrderUseCase,
)
from order_desk.core.ports.outbound.events import EventPublisher, OrderDeleted
from order_desk.core.ports.outbound.orders import OrderRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteOrderDeps:
    orders: OrderRepository
    events: EventPublisher


@dataclass(frozen=True)
class DeleteOrderService(DeleteOrderUseCase):
    deps: DeleteOrderDeps

    def delete_order(self, command: DeleteOrderCommand) -> Result[OrderId, OrderError]:
        result = self.deps.orders.remove(OrderId(command.order_id)).map(self._publish)
        if isinstance(result, Failure):
            logger.info("delete_order rejected: %s", result.failure())
        return result

    def _publish(self, order: Order) -> OrderId:
        self.deps.events.publish(OrderDeleted(order.order_id))
        return order.order_id
