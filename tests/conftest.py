from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pytest

from order_desk.adapters.outbound.in_memory_orders import InMemoryOrderRepository
from order_desk.bootstrap import UseCases
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
from order_desk.core.ports.inbound.add_order import AddOrderCommand, AddOrderLine
from order_desk.core.ports.outbound.events import OrderEvent


@dataclass
class RecordingPublisher:
    events: List[OrderEvent] = field(default_factory=list)

    def publish(self, event: OrderEvent) -> None:
        self.events.append(event)


@pytest.fixture
def repo() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def usecases(repo, publisher) -> UseCases:
    return UseCases(
        add_order=AddOrderService(AddOrderDeps(orders=repo, events=publisher)),
        delete_order=DeleteOrderService(DeleteOrderDeps(orders=repo, events=publisher)),
        update_order=UpdateOrderService(UpdateOrderDeps(orders=repo, events=publisher)),
        query_orders=QueryOrdersService(QueryOrdersDeps(orders=repo)),
        get_order=GetOrderService(GetOrderDeps(orders=repo)),
    )


def add_command(order_id: str, customer: str, *amounts: float) -> AddOrderCommand:
    return AddOrderCommand(
        order_id=order_id,
        customer=customer,
        lines=tuple(AddOrderLine(product_name=f"p{i}", amount=a) for i, a in enumerate(amounts)),
    )
