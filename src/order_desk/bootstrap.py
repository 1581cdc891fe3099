from __future__ import annotations

from dataclasses import dataclass

from order_desk.adapters.outbound.in_memory_orders import InMemoryOrderRepository
from order_desk.adapters.outbound.logging_events import LoggingEventPublisher
from order_desk.config import Settings
from order_desk.core.domain.service.add_order_service import (
    AddOrderDeps,
    AddOrderService,
)
from order_desk.core.domain.service.delete_order_service import (
    DeleteOrderDeps,
    DeleteOrderService,
)
from order_desk.core.domain.service.get_order_service import (
    GetOrderDeps,
    GetOrderService,
)
from order_desk.core.domain.service.query_orders_service import (
    QueryOrdersDeps,
    QueryOrdersService,
)
from order_desk.core.domain.service.update_order_service import (
    UpdateOrderDeps,
    UpdateOrderService,
)


@dataclass(frozen=True)
class UseCases:
    add_order: AddOrderService
    delete_order: DeleteOrderService
    update_order: UpdateOrderService
    query_orders: QueryOrdersService
    get_order: GetOrderService


def build_usecases(settings: Settings | None = None) -> UseCases:
    settings = settings or Settings()
    orders = InMemoryOrderRepository()
    events = LoggingEventPublisher()

    return UseCases(
        add_order=AddOrderService(
            AddOrderDeps(
                orders=orders,
                events=events,
                reject_negative_amounts=settings.reject_negative_amounts,
            )
        ),
        delete_order=DeleteOrderService(DeleteOrderDeps(orders=orders, events=events)),
        update_order=UpdateOrderService(UpdateOrderDeps(orders=orders, events=events)),
        query_orders=QueryOrdersService(QueryOrdersDeps(orders=orders)),
        get_order=GetOrderService(GetOrderDeps(orders=orders)),
    )
