from __future__ import annotations

import logging
from dataclasses import dataclass, field

from order_desk.core.ports.outbound.events import (
    EventPublisher,
    OrderAdded,
    OrderDeleted,
    OrderEvent,
    OrderUpdated,
)


@dataclass
class LoggingEventPublisher(EventPublisher):
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("order_desk.events")
    )

    def publish(self, event: OrderEvent) -> None:
        if isinstance(event, OrderAdded):
            self.logger.info("[event] order_added: %s", event.order_id.value)
        elif isinstance(event, OrderDeleted):
            self.logger.info("[event] order_deleted: %s", event.order_id.value)
        elif isinstance(event, OrderUpdated):
            self.logger.info(
                "[event] order_updated: %s customer=%s",
                event.order_id.value,
                event.customer.value,
            )
