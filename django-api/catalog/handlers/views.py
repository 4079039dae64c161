"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.http import JsonResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.cache import (
    current_version,
    get_lesson_list,
    invalidate_lessons,
    set_lesson_list,
)
from catalog.domain.errors import DomainError, ErrorKind
from catalog.handlers.serializers import (
    LessonSerializer,
    OrderSerializer,
    SearchResultSerializer,
)
from catalog.services import CatalogService, ReservationService
from catalog.stores import get_lesson_store, get_order_store

API_VERSION = "1.0.0"

AVAILABLE_ENDPOINTS = [
    "GET /health",
    "GET /lessons",
    "GET /search?q=query",
    "POST /orders",
    "PUT /lessons/:id",
    "GET /orders",
]

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CAPACITY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORAGE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _error_response(error: DomainError) -> Response:
    return Response(
        {"error": error.code.value, "message": error.message},
        status=_STATUS_BY_KIND[error.kind],
    )


def _catalog_service() -> CatalogService:
    return CatalogService(get_lesson_store())


def _reservation_service() -> ReservationService:
    return ReservationService(get_lesson_store(), get_order_store())


class HealthView(APIView):
    """Handler for GET /health"""

    def get(self, request: Request) -> Response:
        return Response(
            {
                "status": "OK",
                "message": "Lesson booking API is running",
                "timestamp": timezone.now().isoformat(),
                "version": API_VERSION,
            }
        )


class LessonListView(APIView):
    """Handler for GET /lessons"""

    def get(self, request: Request) -> Response:
        version = current_version()
        payload = get_lesson_list(version)
        if payload is None:
            try:
                lessons = _catalog_service().list_lessons()
            except DomainError as error:
                return _error_response(error)
            payload = LessonSerializer(lessons, many=True).data
            set_lesson_list(version, payload)
        return Response(payload)


class LessonDetailView(APIView):
    """Handler for PUT /lessons/{lesson_id}"""

    def put(self, request: Request, lesson_id: str) -> Response:
        try:
            lesson = _catalog_service().update_lesson(lesson_id, request.data)
        except DomainError as error:
            return _error_response(error)
        invalidate_lessons()
        return Response(
            {
                "message": "Lesson updated successfully",
                "lesson": LessonSerializer(lesson).data,
            }
        )


class LessonSearchView(APIView):
    """Handler for GET /search?q={term}"""

    def get(self, request: Request) -> Response:
        try:
            result = _catalog_service().search(request.query_params.get("q"))
        except DomainError as error:
            return _error_response(error)
        return Response(SearchResultSerializer(result).data)


class OrderListView(APIView):
    """Handler for GET and POST /orders"""

    def get(self, request: Request) -> Response:
        try:
            orders = _reservation_service().list_orders()
        except DomainError as error:
            return _error_response(error)
        return Response(OrderSerializer(orders, many=True).data)

    def post(self, request: Request) -> Response:
        data = request.data if hasattr(request.data, "get") else {}
        try:
            order = _reservation_service().place_order(
                data.get("name"), data.get("phone"), data.get("lessons")
            )
        except DomainError as error:
            return _error_response(error)
        finally:
            invalidate_lessons()

        return Response(
            {
                "message": "Order created successfully",
                "orderId": order.id.value,
                "order": OrderSerializer(order).data,
            },
            status=status.HTTP_201_CREATED,
        )


def endpoint_not_found(request, exception=None) -> JsonResponse:
    """JSON 404 for paths outside the API."""
    return JsonResponse(
        {
            "error": "NOT_FOUND",
            "message": "The requested endpoint does not exist",
            "availableEndpoints": AVAILABLE_ENDPOINTS,
        },
        status=404,
    )
