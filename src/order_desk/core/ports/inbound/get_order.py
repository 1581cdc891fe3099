from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from returns.result import Result

from order_desk.core.domain.model.errors import OrderError
from order_desk.core.domain.model.order import CustomerName, OrderId


@dataclass(frozen=True)
class GetOrderQuery:
    order_id: str


@dataclass(frozen=True)
class OrderLineView:
    product_name: str
    amount: float


@dataclass(frozen=True)
class OrderView:
    order_id: OrderId
    customer: CustomerName
    total: float
    lines: Sequence[OrderLineView]


class GetOrderUseCase(Protocol):
    def get_order(self, query: GetOrderQuery) -> Result[OrderView, OrderError]: ...
