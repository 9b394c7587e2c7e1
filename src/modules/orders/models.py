"""Order model.

An order is an unordered set of products (no quantities, no prices).
Order fulfillment never mutates the order itself, only the stock of
the products it references.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Order(BaseModel):
    """Order aggregate root referencing the products to fulfil."""

    items = models.ManyToManyField(
        "products.Product",
        related_name="orders",
        blank=True,
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Order {self.id}"
