from __future__ import annotations

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.products.constants import ProductType
from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed the database with sample products of every type and one order."

    def handle(self, *args, **options):
        self.stdout.write("Seeding fulfillment data...")

        products = self._seed_products()
        order = OrderDjangoRepository().create(products)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={len(products)}, order={order.id}"
            )
        )

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        today = timezone.localdate()
        catalog = [
            {"name": "USB Cable", "product_type": ProductType.NORMAL, "available": 30, "lead_time": 15},
            {"name": "USB Dongle", "product_type": ProductType.NORMAL, "available": 0, "lead_time": 10},
            {
                "name": "Butter",
                "product_type": ProductType.EXPIRABLE,
                "available": 30,
                "lead_time": 15,
                "expiry_date": today + timedelta(days=26),
            },
            {
                "name": "Milk",
                "product_type": ProductType.EXPIRABLE,
                "available": 30,
                "lead_time": 15,
                "expiry_date": today - timedelta(days=2),
            },
            {
                "name": "Watermelon",
                "product_type": ProductType.SEASONAL,
                "available": 30,
                "lead_time": 15,
                "season_start_date": today - timedelta(days=2),
                "season_end_date": today + timedelta(days=58),
            },
            {
                "name": "Grapes",
                "product_type": ProductType.SEASONAL,
                "available": 30,
                "lead_time": 15,
                "season_start_date": today + timedelta(days=180),
                "season_end_date": today + timedelta(days=240),
            },
        ]
        products: list[Product] = []
        for attributes in catalog:
            name = attributes.pop("name")
            product, _ = Product.objects.get_or_create(name=name, defaults=attributes)
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products
