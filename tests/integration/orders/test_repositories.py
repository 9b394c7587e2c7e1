"""Integration tests for the Django order and product repositories."""

from __future__ import annotations

import pytest
from django.db import connection
from django.test.utils import CaptureQueriesContext
from django.utils import timezone

from modules.orders.models import Order
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.services import OrderProcessingService
from modules.orders.strategies import default_registry
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository

pytestmark = pytest.mark.integration


class StaticOrderRepository(OrderDjangoRepository):
    """Hands out orders that were loaded before processing started."""

    def __init__(self, orders):
        self._orders = {str(order.id): order for order in orders}

    def get_by_id(self, id):
        return self._orders.get(str(id))


@pytest.fixture()
def local_today():
    return timezone.localdate()


@pytest.fixture()
def products():
    return [
        Product.objects.create(name="USB Cable", available=10),
        Product.objects.create(name="Headset", available=3),
    ]


class TestOrderDjangoRepository:
    def test_create_links_products(self, products):
        order = OrderDjangoRepository().create(products)

        assert set(order.items.all()) == set(products)

    def test_get_by_id_prefetches_items(self, products):
        order = OrderDjangoRepository().create(products)

        fetched = OrderDjangoRepository().get_by_id(str(order.id))

        with CaptureQueriesContext(connection) as ctx:
            names = sorted(p.name for p in fetched.items.all())
        assert names == ["Headset", "USB Cable"]
        assert len(ctx.captured_queries) == 0

    def test_get_by_id_missing_returns_none(self):
        assert OrderDjangoRepository().get_by_id(str(Order().id)) is None

    def test_get_by_id_malformed_returns_none(self):
        assert OrderDjangoRepository().get_by_id("not-a-uuid") is None

    def test_save_persists_new_order(self):
        order = OrderDjangoRepository().save(Order())

        assert Order.objects.filter(pk=order.pk).exists()

    def test_save_existing_order_touches_updated_at(self, products):
        order = OrderDjangoRepository().create(products)
        created = order.updated_at

        OrderDjangoRepository().save(order)

        order.refresh_from_db()
        assert order.updated_at >= created
        assert order.items.count() == 2


class TestProductDjangoRepository:
    def test_save_persists_available(self, products):
        product = products[0]
        product.available = 9

        ProductDjangoRepository().save(product)

        product.refresh_from_db()
        assert product.available == 9

    def test_save_only_writes_stock(self, products):
        stale = Product.objects.get(pk=products[0].pk)
        Product.objects.filter(pk=stale.pk).update(name="Renamed Cable")
        stale.available -= 1

        ProductDjangoRepository().save(stale)

        fresh = Product.objects.get(pk=stale.pk)
        assert fresh.available == 9
        assert fresh.name == "Renamed Cable"

    def test_save_creates_new_product(self):
        product = ProductDjangoRepository().save(Product(name="Keyboard", available=2))

        assert Product.objects.filter(pk=product.pk, available=2).exists()

    def test_get_by_id(self, products):
        repo = ProductDjangoRepository()

        assert repo.get_by_id(str(products[1].id)) == products[1]
        assert repo.get_by_id("not-a-uuid") is None

    def test_decrement_stock_takes_one_unit(self, products):
        product = products[1]

        assert ProductDjangoRepository().decrement_stock(product) is True

        assert product.available == 2
        assert Product.objects.get(pk=product.pk).available == 2

    def test_decrement_stock_reads_the_stored_count(self, products):
        first = Product.objects.get(pk=products[1].pk)
        second = Product.objects.get(pk=products[1].pk)
        repo = ProductDjangoRepository()

        repo.decrement_stock(first)
        repo.decrement_stock(second)

        assert second.available == 1
        assert Product.objects.get(pk=products[1].pk).available == 1

    def test_decrement_stock_refuses_when_storage_is_empty(self, products):
        stale = Product.objects.get(pk=products[1].pk)
        Product.objects.filter(pk=stale.pk).update(available=0)

        assert ProductDjangoRepository().decrement_stock(stale) is False

        assert stale.available == 0
        assert Product.objects.get(pk=stale.pk).available == 0

    def test_decrement_stock_keeps_other_fields(self, products):
        stale = Product.objects.get(pk=products[0].pk)
        Product.objects.filter(pk=stale.pk).update(name="Renamed Cable")

        ProductDjangoRepository().decrement_stock(stale)

        fresh = Product.objects.get(pk=stale.pk)
        assert fresh.available == 9
        assert fresh.name == "Renamed Cable"


class TestOrdersSharingAProduct:
    def test_orders_loaded_together_each_consume_a_unit(self, local_today):
        shared = Product.objects.create(name="USB Cable", available=5, lead_time=3)
        repo = OrderDjangoRepository()
        first_id = repo.create([shared]).id
        second_id = repo.create([shared]).id
        first = repo.get_by_id(str(first_id))
        second = repo.get_by_id(str(second_id))
        service = OrderProcessingService(
            order_repository=StaticOrderRepository([first, second]),
            registry=default_registry(),
        )

        service.process_order(first_id, today=local_today)
        service.process_order(second_id, today=local_today)

        assert Product.objects.get(pk=shared.pk).available == 3

    def test_last_unit_goes_to_one_order_only(self, local_today):
        shared = Product.objects.create(name="USB Dongle", available=1, lead_time=9)
        repo = OrderDjangoRepository()
        first = repo.get_by_id(str(repo.create([shared]).id))
        second = repo.get_by_id(str(repo.create([shared]).id))
        service = OrderProcessingService(
            order_repository=StaticOrderRepository([first, second]),
            registry=default_registry(),
        )

        service.process_order(first.id, today=local_today)
        service.process_order(second.id, today=local_today)

        assert Product.objects.get(pk=shared.pk).available == 0
        assert [p.available for p in second.items.all()] == [0]
