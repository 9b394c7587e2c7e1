"""Shared response DTOs.

``ErrorResponseDTO`` is the uniform error body returned by every
fulfillment endpoint: HTTP status, a short title, a human-readable
message and the moment the error was produced.
"""

from __future__ import annotations

from datetime import datetime

from django.utils import timezone
from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ErrorResponseDTO(BaseModel):
    """Immutable DTO for error responses."""

    model_config = ConfigDict(frozen=True)

    status: int
    title: str
    message: str
    timestamp: datetime = Field(default_factory=timezone.now)

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return value.strftime("%Y-%m-%dT%H:%M:%S")
