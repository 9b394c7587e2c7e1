"""Log-based delivery of notification events."""

from __future__ import annotations

import structlog

from modules.notifications.events import (
    DelayNotificationRequested,
    ExpirationNotificationRequested,
    OutOfStockNotificationRequested,
)
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class DelayNotificationHandler(IEventHandler[DelayNotificationRequested]):
    def handle(self, event: DelayNotificationRequested) -> None:
        logger.info(
            f"Product {event.product_name} is out of stock, "
            f"available again in {event.lead_time} days",
            notification="delay",
            product_name=event.product_name,
            lead_time=event.lead_time,
        )


class ExpirationNotificationHandler(IEventHandler[ExpirationNotificationRequested]):
    def handle(self, event: ExpirationNotificationRequested) -> None:
        logger.info(
            f"Product {event.product_name} is unavailable, "
            f"expired on {event.expiry_date.isoformat()}",
            notification="expiration",
            product_name=event.product_name,
            expiry_date=event.expiry_date.isoformat(),
        )


class OutOfStockNotificationHandler(IEventHandler[OutOfStockNotificationRequested]):
    def handle(self, event: OutOfStockNotificationRequested) -> None:
        logger.info(
            f"Product {event.product_name} is out of stock",
            notification="out_of_stock",
            product_name=event.product_name,
        )


delay_notification_handler = DelayNotificationHandler()
expiration_notification_handler = ExpirationNotificationHandler()
out_of_stock_notification_handler = OutOfStockNotificationHandler()
