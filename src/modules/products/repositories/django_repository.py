"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern (``None`` for missing or
malformed IDs); write failures are never caught here.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def save(self, entity: Product) -> Product:
        """Persist a product.

        Existing rows only write ``available`` (plus ``updated_at``), so a
        stock update never overwrites concurrent edits to other fields.
        """
        if entity._state.adding:
            entity.save()
        else:
            entity.save(update_fields=["available"])
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            available=entity.available,
        )
        return entity

    @transaction.atomic
    def decrement_stock(self, entity: Product) -> bool:
        """Take one unit under a row lock (SELECT FOR UPDATE).

        Raises ``Product.DoesNotExist`` if the row was deleted meanwhile.
        """
        locked = Product.objects.select_for_update().get(pk=entity.pk)
        if locked.available <= 0:
            entity.available = locked.available
            return False

        locked.available -= 1
        locked.save(update_fields=["available"])
        entity.available = locked.available
        entity.updated_at = locked.updated_at
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            available=entity.available,
        )
        return True
