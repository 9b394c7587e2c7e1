"""Product domain constants."""

from django.db import models


class ProductType(models.TextChoices):
    NORMAL = "NORMAL", "Normal"
    SEASONAL = "SEASONAL", "Seasonal"
    EXPIRABLE = "EXPIRABLE", "Expirable"


def normalize_product_type(value: str) -> str:
    """Return the stored form of a product type tag ("seasonal " -> "SEASONAL")."""
    return value.strip().upper()
