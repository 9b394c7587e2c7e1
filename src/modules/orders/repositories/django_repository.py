"""Django ORM implementation of the Order repository."""

from __future__ import annotations

from typing import Iterable, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository
from modules.products.models import Product

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with ``items`` prefetched.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Order.objects.prefetch_related("items").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def save(self, entity: Order) -> Order:
        entity.save()
        logger.info("order.saved", order_id=str(entity.id))
        return entity

    @transaction.atomic
    def create(self, products: Iterable[Product]) -> Order:
        """Create an order referencing ``products``."""
        order = Order.objects.create()
        order.items.set(list(products))
        logger.info(
            "order.created",
            order_id=str(order.id),
            item_count=order.items.count(),
        )
        return order
