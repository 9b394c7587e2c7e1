"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``ProcessOrderOutputDTO``: confirmation returned after processing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from modules.orders.models import Order


class ProcessOrderOutputDTO(BaseModel):
    """Immutable DTO for the process-order response."""

    model_config = ConfigDict(frozen=True)

    id: UUID

    @classmethod
    def from_entity(cls, order: Order) -> ProcessOrderOutputDTO:
        return cls(id=order.id)
