"""Order API views.

Exposes the ``OrderProcessingService`` via HTTP.  Domain exceptions are
caught and translated into ``ErrorResponseDTO`` bodies with the matching
HTTP status; anything else is left to the global exception handler.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.dtos import ErrorResponseDTO
from modules.orders.dtos import ProcessOrderOutputDTO
from modules.orders.exceptions import (
    InvalidProductConfiguration,
    OrderNotFound,
    UnknownStrategy,
)
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    ErrorResponseSerializer,
    ProcessOrderResponseSerializer,
)
from modules.orders.services import OrderProcessingService
from modules.orders.strategies.registry import default_registry


def _error(http_status: int, title: str, message: str) -> Response:
    body = ErrorResponseDTO(status=http_status, title=title, message=message)
    return Response(body.model_dump(mode="json"), status=http_status)


class OrderViewSet(ViewSet):
    """ViewSet for order fulfillment.

    Uses ``OrderProcessingService`` with the Django repository and the
    process-wide strategy registry (DIP).
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderProcessingService(
            order_repository=OrderDjangoRepository(),
            registry=default_registry(),
        )

    @extend_schema(
        request=None,
        responses={
            200: ProcessOrderResponseSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=["post"], url_path="processOrder")
    def process_order(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/processOrder/"""
        try:
            order = self._service.process_order(pk)
        except OrderNotFound as exc:
            return _error(status.HTTP_404_NOT_FOUND, "Order Not Found", str(exc))
        except (UnknownStrategy, InvalidProductConfiguration) as exc:
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid Request", str(exc))

        out = ProcessOrderOutputDTO.from_entity(order)
        return Response(out.model_dump(mode="json"))
