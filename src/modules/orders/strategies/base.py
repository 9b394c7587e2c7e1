"""Availability-gate processing strategy.

Every product type follows the same decision shape::

    unsellable today?          -> unsellable notification, no mutation
    stock left?                -> decrement by one and persist
    restock before deadline?   -> delay notification
    otherwise                  -> unsellable notification

Concrete strategies only supply the gate (``is_unsellable``), the
restock deadline check and the unsellable notification.  The processing
date is always passed in by the caller.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from modules.notifications.interfaces import INotificationService
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProcessingOutcome(str, enum.Enum):
    DECREMENTED = "DECREMENTED"
    DELAYED = "DELAYED"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    EXPIRED = "EXPIRED"


def delivery_date(today: date, lead_time: int) -> date:
    """Date a restock ordered ``today`` would arrive."""
    return today + timedelta(days=lead_time)


class ProductProcessingStrategy(ABC):
    """Decides, for one product, between consuming stock and notifying."""

    def __init__(
        self,
        product_repository: IProductRepository,
        notification_service: INotificationService,
    ) -> None:
        self._product_repo = product_repository
        self._notifier = notification_service

    def process(self, product: Product, today: date) -> ProcessingOutcome:
        if self.is_unsellable(product, today):
            return self.notify_unsellable(product)

        if product.available > 0 and self._decrement_stock(product):
            return ProcessingOutcome.DECREMENTED

        if self.can_restock_before_deadline(product, today):
            self._notifier.notify_delay(product.lead_time, product.name)
            return ProcessingOutcome.DELAYED

        return self.notify_unsellable(product)

    # ------------------------------------------------------------------
    # Variant hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def is_unsellable(self, product: Product, today: date) -> bool:
        """Whether the product cannot be sold today regardless of stock."""

    @abstractmethod
    def can_restock_before_deadline(self, product: Product, today: date) -> bool:
        """Whether a restock ordered today arrives while the product is still sellable."""

    @abstractmethod
    def notify_unsellable(self, product: Product) -> ProcessingOutcome:
        """Emit the type-specific unavailability notification."""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _decrement_stock(self, product: Product) -> bool:
        """Take one unit through the repository.

        False means storage had no stock left (another order got there
        first); ``product.available`` then reflects the stored count.
        """
        if not self._product_repo.decrement_stock(product):
            logger.info("product.stock_exhausted", product_id=str(product.id))
            return False
        logger.debug(
            "product.stock_decremented",
            product_id=str(product.id),
            remaining=product.available,
        )
        return True
