"""Order processing service (Use Case).

Fulfils an order: every product it references is handed to the
processing strategy registered for its type, together with the
processing date.

Rules enforced:
- Unknown order id -> ``OrderNotFound``.
- Product type without strategy -> ``UnknownStrategy`` (aborts the call).
- No enclosing transaction: each stock decrement is persisted as it
  happens, so products processed before a failure keep their mutation.
- The order itself is never modified.
"""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

import structlog
from django.utils import timezone

from modules.orders.exceptions import OrderNotFound

if TYPE_CHECKING:
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.orders.strategies.registry import StrategyRegistry

logger = structlog.get_logger(__name__)


class OrderProcessingService:
    """Application service for order fulfillment.

    Receives the order repository and the strategy registry via
    constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        registry: StrategyRegistry,
    ) -> None:
        self._order_repo = order_repository
        self._registry = registry

    def process_order(
        self, order_id: UUID | str, today: Optional[date] = None
    ) -> Order:
        """Process every product of an order.

        ``today`` defaults to the current local date and is evaluated once,
        so all products of one order are judged against the same day.

        Raises:
            OrderNotFound: the order does not exist.
            UnknownStrategy: a product type has no registered strategy.
            InvalidProductConfiguration: a product lacks a required date.
        """
        order = self._order_repo.get_by_id(str(order_id))
        if not order:
            raise OrderNotFound(order_id)

        if today is None:
            today = timezone.localdate()

        log = logger.bind(order_id=str(order.id), processing_date=today.isoformat())
        log.info("order.processing_started")

        outcomes: Counter[str] = Counter()
        for product in order.items.all():
            strategy = self._registry.resolve(product.product_type)
            outcome = strategy.process(product, today)
            outcomes[outcome.value] += 1
            log.info(
                "order.product_processed",
                product_id=str(product.id),
                product_type=product.product_type,
                outcome=outcome.value,
            )

        log.info("order.processed", outcomes=dict(outcomes))
        return order
