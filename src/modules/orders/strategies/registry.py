"""Strategy registry: product type tag -> processing strategy.

The mapping is built once and exposed read-only.  New product types are
supported by passing extra strategies to ``build_registry``.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional

from modules.orders.exceptions import UnknownStrategy
from modules.orders.strategies.products import (
    ExpirableProductStrategy,
    NormalProductStrategy,
    SeasonalProductStrategy,
)
from modules.products.constants import ProductType

if TYPE_CHECKING:
    from modules.notifications.interfaces import INotificationService
    from modules.orders.strategies.base import ProductProcessingStrategy
    from modules.products.repositories.interfaces import IProductRepository


class StrategyRegistry:
    """Read-only lookup of processing strategies by stored type tag."""

    def __init__(self, strategies: Mapping[str, ProductProcessingStrategy]) -> None:
        self._strategies = MappingProxyType(dict(strategies))

    def resolve(self, product_type: str) -> ProductProcessingStrategy:
        """Return the strategy for ``product_type`` (exact match).

        Raises:
            UnknownStrategy: no strategy is registered for the tag.
        """
        try:
            return self._strategies[product_type]
        except KeyError:
            raise UnknownStrategy(product_type) from None

    def registered_types(self) -> list[str]:
        return sorted(self._strategies)

    def __contains__(self, product_type: object) -> bool:
        return product_type in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)


def build_registry(
    product_repository: IProductRepository,
    notification_service: INotificationService,
    extra: Optional[Mapping[str, ProductProcessingStrategy]] = None,
) -> StrategyRegistry:
    """Build the registry for the built-in product types plus ``extra``."""
    strategies: dict[str, ProductProcessingStrategy] = {
        ProductType.NORMAL.value: NormalProductStrategy(
            product_repository, notification_service
        ),
        ProductType.SEASONAL.value: SeasonalProductStrategy(
            product_repository, notification_service
        ),
        ProductType.EXPIRABLE.value: ExpirableProductStrategy(
            product_repository, notification_service
        ),
    }
    if extra:
        strategies.update(extra)
    return StrategyRegistry(strategies)


@lru_cache(maxsize=1)
def default_registry() -> StrategyRegistry:
    """Process-wide registry wired to the Django repository and the event bus."""
    from modules.notifications.services import NotificationService
    from modules.products.repositories.django_repository import (
        ProductDjangoRepository,
    )

    return build_registry(ProductDjangoRepository(), NotificationService())
