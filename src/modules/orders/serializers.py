"""Order DRF serializers.

Used to describe the process-order responses in the OpenAPI schema;
the view builds its payloads from the Pydantic DTOs.
"""

from __future__ import annotations

from rest_framework import serializers


class ProcessOrderResponseSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)


class ErrorResponseSerializer(serializers.Serializer):
    status = serializers.IntegerField(read_only=True)
    title = serializers.CharField(read_only=True)
    message = serializers.CharField(read_only=True)
    timestamp = serializers.CharField(read_only=True)
