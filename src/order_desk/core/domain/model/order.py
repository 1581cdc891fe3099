from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class OrderId:
    value: str


@dataclass(frozen=True)
class CustomerName:
    value: str


@dataclass(frozen=True)
class LineItem:
    product_name: str
    amount: float


@dataclass(frozen=True)
class Order:
    order_id: OrderId
    customer: CustomerName
    items: Tuple[LineItem, ...] = ()

    def total(self) -> float:
        return sum((it.amount for it in self.items), 0.0)

    def with_customer(self, customer: CustomerName) -> "Order":
        return replace(self, customer=customer)

    def matches_keyword(self, keyword: str) -> bool:
        return keyword in self.order_id.value or keyword in self.customer.value
