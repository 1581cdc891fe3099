from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from returns.result import Result

from order_desk.core.domain.model.errors import OrderError
from order_desk.core.ports.inbound.get_order import OrderView


@dataclass(frozen=True)
class UpdateOrderCommand:
    order_id: str
    customer: str


class UpdateOrderUseCase(Protocol):
    def update_order(
        self, command: UpdateOrderCommand
    ) -> Result[OrderView, OrderError]: ...
