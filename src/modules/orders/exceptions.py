"""Order fulfillment exceptions.

Raised by the Service Layer and the processing strategies.  The API
layer (Views) catches these and translates them into appropriate HTTP
responses; nothing here is retried or recovered locally.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist."""

    def __init__(self, order_id) -> None:
        self.order_id = order_id
        super().__init__(f"Order not found with id: {order_id}")


class UnknownStrategy(ValueError):
    """A product's type tag has no registered processing strategy."""

    def __init__(self, product_type: str) -> None:
        self.product_type = product_type
        super().__init__(f"No strategy found for product type: {product_type}")


class InvalidProductConfiguration(ValueError):
    """A product lacks a lifecycle date its strategy needs.

    Seasonal products need both season dates; expirable products need an
    expiry date.
    """
