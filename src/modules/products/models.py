"""Product model carrying stock and lifecycle attributes.

Business rules implemented:
- ``product_type`` is normalised (stripped, upper-cased) on save so the
  strategy registry can resolve it with an exact lookup.
- ``available`` and ``lead_time`` cannot be negative.
- Seasonal products need a season window, expirable products an expiry
  date (validated in ``clean()``; the processing strategies re-check).
"""

from __future__ import annotations

import structlog
from django.core.exceptions import ValidationError
from django.db import models

from modules.core.models import BaseModel
from modules.products.constants import ProductType, normalize_product_type

logger = structlog.get_logger(__name__)


class Product(BaseModel):
    """A sellable product as seen by order fulfillment."""

    product_type = models.CharField(
        max_length=32,
        choices=ProductType.choices,
        default=ProductType.NORMAL,
    )
    name = models.CharField(max_length=255)
    available = models.PositiveIntegerField(default=0)
    lead_time = models.PositiveIntegerField(default=0)
    expiry_date = models.DateField(null=True, blank=True, default=None)
    season_start_date = models.DateField(null=True, blank=True, default=None)
    season_end_date = models.DateField(null=True, blank=True, default=None)

    class Meta:
        db_table = "products"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["product_type"], name="products_type_idx"),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.product_type:
            self.product_type = normalize_product_type(self.product_type)
        if self.product_type == ProductType.SEASONAL and (
            self.season_start_date is None or self.season_end_date is None
        ):
            raise ValidationError(
                {"season_end_date": "Seasonal products need a season window."}
            )
        if self.product_type == ProductType.EXPIRABLE and self.expiry_date is None:
            raise ValidationError(
                {"expiry_date": "Expirable products need an expiry date."}
            )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        if self.product_type:
            self.product_type = normalize_product_type(self.product_type)
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product.created",
                product_id=str(self.id),
                product_type=self.product_type,
                name=self.name,
            )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.product_type})"
