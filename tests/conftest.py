from datetime import date

import pytest

from rest_framework.test import APIClient

from modules.products.constants import ProductType
from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def today():
    """Fixed processing date shared by strategy and service tests."""
    return date(2025, 6, 15)


@pytest.fixture()
def make_product():
    """Build (unsaved) products with sensible defaults per type."""

    def _make(product_type=ProductType.NORMAL, **overrides) -> Product:
        defaults = {
            "product_type": product_type,
            "name": "USB Cable",
            "available": 5,
            "lead_time": 10,
        }
        defaults.update(overrides)
        return Product(**defaults)

    return _make
