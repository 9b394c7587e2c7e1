"""Product repository interface.

The only write the fulfillment core performs on a product is taking one
unit of stock; ``decrement_stock`` is that operation.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key, or ``None``."""

    @abstractmethod
    def save(self, entity: Product) -> Product:
        """Persist the product.  Storage failures propagate unchanged."""

    @abstractmethod
    def decrement_stock(self, entity: Product) -> bool:
        """Atomically take one unit of stock from the stored product.

        The check and the write happen against the stored row, never the
        possibly stale in-memory count, so orders sharing a product each
        consume their own unit.  ``entity.available`` is refreshed from
        storage.  Returns ``False`` (and writes nothing) when the stored
        count is already zero.
        """
