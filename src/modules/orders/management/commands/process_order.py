from __future__ import annotations

from datetime import date

from django.core.management.base import BaseCommand, CommandError

from modules.orders.exceptions import (
    InvalidProductConfiguration,
    OrderNotFound,
    UnknownStrategy,
)
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderProcessingService
from modules.orders.strategies.registry import default_registry


class Command(BaseCommand):
    help = "Process an order: consume stock or notify delays per product."

    def add_arguments(self, parser):
        parser.add_argument("order_id", help="Identifier of the order to process.")
        parser.add_argument(
            "--date",
            dest="processing_date",
            type=date.fromisoformat,
            default=None,
            help="Processing date (YYYY-MM-DD). Defaults to today.",
        )

    def handle(self, *args, **options):
        service = OrderProcessingService(
            order_repository=OrderDjangoRepository(),
            registry=default_registry(),
        )
        try:
            order = service.process_order(
                options["order_id"], today=options["processing_date"]
            )
        except (OrderNotFound, UnknownStrategy, InvalidProductConfiguration) as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(self.style.SUCCESS(f"Processed order {order.id}"))
