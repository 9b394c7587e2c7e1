"""Notification events published on the in-process bus."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from shared.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class DelayNotificationRequested(DomainEvent):
    product_name: str
    lead_time: int


@dataclass(frozen=True, kw_only=True)
class ExpirationNotificationRequested(DomainEvent):
    product_name: str
    expiry_date: date


@dataclass(frozen=True, kw_only=True)
class OutOfStockNotificationRequested(DomainEvent):
    product_name: str
