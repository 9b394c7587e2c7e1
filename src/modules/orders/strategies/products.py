"""Processing strategies for the built-in product types."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from modules.orders.exceptions import InvalidProductConfiguration
from modules.orders.strategies.base import (
    ProcessingOutcome,
    ProductProcessingStrategy,
    delivery_date,
)

if TYPE_CHECKING:
    from modules.products.models import Product


class NormalProductStrategy(ProductProcessingStrategy):
    """Always sellable; an empty shelf means waiting for the lead time."""

    def is_unsellable(self, product: Product, today: date) -> bool:
        return False

    def can_restock_before_deadline(self, product: Product, today: date) -> bool:
        return True

    def notify_unsellable(self, product: Product) -> ProcessingOutcome:
        """Unreachable: a normal product is never gated and can always be restocked."""
        self._notifier.notify_delay(product.lead_time, product.name)
        return ProcessingOutcome.DELAYED


class SeasonalProductStrategy(ProductProcessingStrategy):
    """Sellable inside the half-open window [season_start, season_end).

    Without stock, a delay is only worth announcing if the restock lands
    strictly before the season ends.
    """

    def is_unsellable(self, product: Product, today: date) -> bool:
        start, end = self._season(product)
        return today < start or today >= end

    def can_restock_before_deadline(self, product: Product, today: date) -> bool:
        _, end = self._season(product)
        return delivery_date(today, product.lead_time) < end

    def notify_unsellable(self, product: Product) -> ProcessingOutcome:
        self._notifier.notify_out_of_stock(product.name)
        return ProcessingOutcome.OUT_OF_STOCK

    @staticmethod
    def _season(product: Product) -> tuple[date, date]:
        if product.season_start_date is None or product.season_end_date is None:
            raise InvalidProductConfiguration(
                f"Seasonal product {product.name!r} has no season window."
            )
        return product.season_start_date, product.season_end_date


class ExpirableProductStrategy(ProductProcessingStrategy):
    """Sellable strictly before its expiry date; the expiry day itself is expired."""

    def is_unsellable(self, product: Product, today: date) -> bool:
        return self._expiry(product) <= today

    def can_restock_before_deadline(self, product: Product, today: date) -> bool:
        return delivery_date(today, product.lead_time) < self._expiry(product)

    def notify_unsellable(self, product: Product) -> ProcessingOutcome:
        self._notifier.notify_expiration(product.name, self._expiry(product))
        return ProcessingOutcome.EXPIRED

    @staticmethod
    def _expiry(product: Product) -> date:
        if product.expiry_date is None:
            raise InvalidProductConfiguration(
                f"Expirable product {product.name!r} has no expiry date."
            )
        return product.expiry_date
