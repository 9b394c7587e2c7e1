from modules.orders.strategies.base import ProcessingOutcome, ProductProcessingStrategy
from modules.orders.strategies.products import (
    ExpirableProductStrategy,
    NormalProductStrategy,
    SeasonalProductStrategy,
)
from modules.orders.strategies.registry import (
    StrategyRegistry,
    build_registry,
    default_registry,
)

__all__ = [
    "ExpirableProductStrategy",
    "NormalProductStrategy",
    "ProcessingOutcome",
    "ProductProcessingStrategy",
    "SeasonalProductStrategy",
    "StrategyRegistry",
    "build_registry",
    "default_registry",
]
