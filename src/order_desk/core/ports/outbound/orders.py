from __future__ import annotations

from typing import Protocol, Sequence

from returns.result import Result

from order_desk.core.domain.model.errors import OrderError
from order_desk.core.domain.model.order import CustomerName, Order, OrderId


class OrderRepository(Protocol):
    """
    Keyed store of orders. Each method is a single logical step: a Failure
    means nothing was changed.
    """

    def add(self, order: Order) -> Result[OrderId, OrderError]: ...

    def remove(self, order_id: OrderId) -> Result[Order, OrderError]: ...

    def rename_customer(
        self, order_id: OrderId, customer: CustomerName
    ) -> Result[Order, OrderError]: ...

    def get(self, order_id: OrderId) -> Result[Order, OrderError]: ...

    def all(self) -> Result[Sequence[Order], OrderError]:
        """Every stored order, in insertion order."""
        ...
