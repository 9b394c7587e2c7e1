"""Notifier contract used by the product processing strategies.

All calls are fire-and-forget from the caller's point of view: nothing
is returned and the strategies never inspect the outcome of delivery.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class INotificationService(ABC):
    """Customer-facing notifications emitted while fulfilling an order."""

    @abstractmethod
    def notify_delay(self, lead_time: int, product_name: str) -> None:
        """The product is out of stock and will be available in ``lead_time`` days."""

    @abstractmethod
    def notify_expiration(self, product_name: str, expiry_date: date) -> None:
        """The product expired (or would expire before it can be restocked)."""

    @abstractmethod
    def notify_out_of_stock(self, product_name: str) -> None:
        """The product cannot be sold (out of season or season ends before restock)."""
