from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Sequence

from returns.result import Failure, Result, Success

from order_desk.core.domain.model.errors import (
    DuplicateKey,
    OrderError,
    OrderNotFound,
)
from order_desk.core.domain.model.order import CustomerName, Order, OrderId
from order_desk.core.ports.outbound.orders import OrderRepository

logger = logging.getLogger(__name__)


@dataclass
class InMemoryOrderRepository(OrderRepository):
    """
    Process-lifetime order store. One lock guards the map so every method is
    atomic with respect to the others.
    """

    _store: Dict[str, Order] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add(self, order: Order) -> Result[OrderId, OrderError]:
        key = order.order_id.value
        with self._lock:
            if key in self._store:
                return Failure(DuplicateKey(message="order already exists", order_id=key))
            self._store[key] = order
        logger.debug("stored order %s (%d items)", key, len(order.items))
        return Success(order.order_id)

    def remove(self, order_id: OrderId) -> Result[Order, OrderError]:
        key = order_id.value
        with self._lock:
            removed = self._store.pop(key, None)
        if removed is None:
            return Failure(OrderNotFound(message="order does not exist", order_id=key))
        logger.debug("removed order %s", key)
        return Success(removed)

    def rename_customer(
        self, order_id: OrderId, customer: CustomerName
    ) -> Result[Order, OrderError]:
        key = order_id.value
        with self._lock:
            current = self._store.get(key)
            if current is None:
                return Failure(OrderNotFound(message="order does not exist", order_id=key))
            updated = current.with_customer(customer)
            self._store[key] = updated
        logger.debug("renamed customer of order %s", key)
        return Success(updated)

    def get(self, order_id: OrderId) -> Result[Order, OrderError]:
        key = order_id.value
        with self._lock:
            order = self._store.get(key)
        if order is None:
            return Failure(OrderNotFound(message="order does not exist", order_id=key))
        return Success(order)

    def all(self) -> Result[Sequence[Order], OrderError]:
        with self._lock:
            return Success(tuple(self._store.values()))
