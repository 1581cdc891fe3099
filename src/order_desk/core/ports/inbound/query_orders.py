from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from returns.result import Result

from order_desk.core.domain.model.errors import OrderError
from order_desk.core.ports.inbound.get_order import OrderView


@dataclass(frozen=True)
class QueryOrdersQuery:
    keyword: str | None = None
    min_amount: float | None = None
    max_amount: float | None = None


class QueryOrdersUseCase(Protocol):
    def query_orders(
        self, query: QueryOrdersQuery
    ) -> Result[Sequence[OrderView], OrderError]: ...
