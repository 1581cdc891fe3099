from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from returns.result import Result

from order_desk.core.domain.model.errors import OrderError
from order_desk.core.ports.inbound.get_order import OrderView


@dataclass(frozen=True)
class AddOrderLine:
    product_name: str
    amount: float


@dataclass(frozen=True)
class AddOrderCommand:
    order_id: str
    customer: str
    lines: Sequence[AddOrderLine] = ()


class AddOrderUseCase(Protocol):
    def add_order(self, command: AddOrderCommand) -> Result[OrderView, OrderError]: ...
