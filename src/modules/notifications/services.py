"""Notification service.

Turns each notifier call into an immutable event on the event bus.
Delivery is whatever the subscribed handlers do; the default handlers
(``modules.notifications.handlers``) write a structured log line.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import structlog

from modules.notifications.events import (
    DelayNotificationRequested,
    ExpirationNotificationRequested,
    OutOfStockNotificationRequested,
)
from modules.notifications.interfaces import INotificationService
from shared.domain.bus import IEventBus
from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


class NotificationService(INotificationService):
    """Publishes notification requests on an ``IEventBus``."""

    def __init__(self, bus: Optional[IEventBus] = None) -> None:
        if bus is None:
            from shared.infrastructure.bus import event_bus

            bus = event_bus
        self._bus = bus

    def notify_delay(self, lead_time: int, product_name: str) -> None:
        self._publish(
            DelayNotificationRequested(product_name=product_name, lead_time=lead_time)
        )

    def notify_expiration(self, product_name: str, expiry_date: date) -> None:
        self._publish(
            ExpirationNotificationRequested(
                product_name=product_name, expiry_date=expiry_date
            )
        )

    def notify_out_of_stock(self, product_name: str) -> None:
        self._publish(OutOfStockNotificationRequested(product_name=product_name))

    def _publish(self, event: DomainEvent) -> None:
        delivered = self._bus.publish(event)
        logger.debug(
            "notification.published",
            event_name=event.event_name,
            product_name=event.product_name,
            handlers=delivered,
        )
