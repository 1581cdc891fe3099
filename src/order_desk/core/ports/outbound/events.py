from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from order_desk.core.domain.model.order import CustomerName, OrderId


@dataclass(frozen=True)
class OrderAdded:
    order_id: OrderId


@dataclass(frozen=True)
class OrderDeleted:
    order_id: OrderId


@dataclass(frozen=True)
class OrderUpdated:
    order_id: OrderId
    customer: CustomerName


OrderEvent = Union[OrderAdded, OrderDeleted, OrderUpdated]


class EventPublisher(Protocol):
    def publish(self, event: OrderEvent) -> None: ...
