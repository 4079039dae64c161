"""Integration tests for the lesson booking HTTP API.

Run with: pytest tests/test_lesson_api.py -v
"""

import uuid

import pytest
from rest_framework.test import APIClient

from catalog import models


def _create_lesson(**overrides) -> models.Lesson:
    fields = dict(
        subject="Mathematics",
        location="Hendon",
        price=100,
        space=5,
        image="math-hendon.jpg",
    )
    fields.update(overrides)
    return models.Lesson.objects.create(**fields)


@pytest.mark.django_db
class TestHealth:
    """Tests for GET /health"""

    def test_health(self, api_client: APIClient):
        """Given a running service, returns 200 OK."""
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "OK"


@pytest.mark.django_db
class TestLessonList:
    """Tests for GET /lessons"""

    def test_list_lessons(self, api_client: APIClient):
        """Given lessons exist, returns them all."""
        lesson = _create_lesson()

        response = api_client.get("/lessons")

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": str(lesson.pk),
                "subject": "Mathematics",
                "location": "Hendon",
                "price": 100,
                "space": 5,
                "image": "math-hendon.jpg",
            }
        ]

    def test_list_lessons_empty_catalog(self, api_client: APIClient):
        """Given no lessons, returns an empty list."""
        response = api_client.get("/lessons")

        assert response.status_code == 200
        assert response.json() == []


@pytest.mark.django_db
class TestSearch:
    """Tests for GET /search"""

    def test_search(self, api_client: APIClient):
        """Given a term, returns matching lessons with a count."""
        lesson = _create_lesson()
        _create_lesson(subject="Art", location="Colindale", price=70, space=8)

        response = api_client.get("/search", {"q": "math"})

        assert response.status_code == 200
        body = response.json()
        assert body["query"] == "math"
        assert body["count"] == 1
        assert body["results"][0]["id"] == str(lesson.pk)

    def test_search_without_query(self, api_client: APIClient):
        """Given no q parameter, returns 400 MISSING_QUERY."""
        response = api_client.get("/search")

        assert response.status_code == 400
        assert response.json()["error"] == "MISSING_QUERY"


@pytest.mark.django_db
class TestCreateOrder:
    """Tests for POST /orders"""

    def test_create_order(self, api_client: APIClient):
        """Given a valid order, returns 201 and decrements space."""
        lesson = _create_lesson(price=100, space=5)

        response = api_client.post(
            "/orders",
            {"name": "Ada Lovelace", "phone": "0123", "lessons": [{"lessonId": str(lesson.pk), "quantity": 2}]},
            format="json",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Order created successfully"
        assert body["orderId"] == body["order"]["id"]
        assert body["order"]["totalAmount"] == 200
        assert body["order"]["status"] == "confirmed"
        assert body["order"]["lessons"] == [
            {"lessonId": str(lesson.pk), "quantity": 2, "unitPrice": 100}
        ]
        lesson.refresh_from_db()
        assert lesson.space == 3
        assert models.Order.objects.count() == 1

    def test_invalid_name(self, api_client: APIClient):
        """Given a name with digits, returns 400 INVALID_NAME."""
        lesson = _create_lesson()

        response = api_client.post(
            "/orders",
            {"name": "Ada 2", "phone": "0123", "lessons": [{"lessonId": str(lesson.pk), "quantity": 1}]},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_NAME"

    def test_insufficient_capacity(self, api_client: APIClient):
        """Given one short item, returns 400 and restores the others."""
        first = _create_lesson(space=5)
        second = _create_lesson(subject="Science", location="Brent Cross", space=1)

        response = api_client.post(
            "/orders",
            {
                "name": "Ada",
                "phone": "0123",
                "lessons": [
                    {"lessonId": str(first.pk), "quantity": 2},
                    {"lessonId": str(second.pk), "quantity": 2},
                ],
            },
            format="json",
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "INSUFFICIENT_CAPACITY",
            "message": "Not enough spaces available for Science in Brent Cross",
        }
        first.refresh_from_db()
        assert first.space == 5
        assert models.Order.objects.count() == 0

    def test_unknown_lesson(self, api_client: APIClient):
        """Given an unknown lesson id, returns 404."""
        missing = str(uuid.uuid4())

        response = api_client.post(
            "/orders",
            {"name": "Ada", "phone": "0123", "lessons": [{"lessonId": missing, "quantity": 1}]},
            format="json",
        )

        assert response.status_code == 404
        assert missing in response.json()["message"]

    def test_list_orders(self, api_client: APIClient):
        """Given a placed order, returns it in the ledger."""
        lesson = _create_lesson()
        api_client.post(
            "/orders",
            {"name": "Ada", "phone": "0123", "lessons": [{"lessonId": str(lesson.pk), "quantity": 1}]},
            format="json",
        )

        response = api_client.get("/orders")

        assert response.status_code == 200
        [order] = response.json()
        assert order["name"] == "Ada"
        assert order["phone"] == "0123"
        assert order["totalAmount"] == 100


@pytest.mark.django_db
class TestUpdateLesson:
    """Tests for PUT /lessons/{id}"""

    def test_update_lesson(self, api_client: APIClient):
        """Given valid fields, returns 200 with the updated lesson."""
        lesson = _create_lesson()

        response = api_client.put(
            f"/lessons/{lesson.pk}", {"price": 120, "location": "Colindale"}, format="json"
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Lesson updated successfully"
        assert body["lesson"]["price"] == 120
        assert body["lesson"]["location"] == "Colindale"
        lesson.refresh_from_db()
        assert lesson.price == 120

    def test_update_negative_space(self, api_client: APIClient):
        """Given a negative space, returns 400 INVALID_SPACE."""
        lesson = _create_lesson()

        response = api_client.put(f"/lessons/{lesson.pk}", {"space": -1}, format="json")

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_SPACE"
        lesson.refresh_from_db()
        assert lesson.space == 5

    def test_update_price_too_large(self, api_client: APIClient):
        """Given a price beyond the storable integer range, returns 400 INVALID_PRICE."""
        lesson = _create_lesson()

        response = api_client.put(f"/lessons/{lesson.pk}", {"price": 10**20}, format="json")

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_PRICE"
        lesson.refresh_from_db()
        assert lesson.price == 100

    def test_update_space_too_large(self, api_client: APIClient):
        """Given a space of 2**31, returns 400 INVALID_SPACE and keeps the lesson."""
        lesson = _create_lesson()

        response = api_client.put(f"/lessons/{lesson.pk}", {"space": 2**31}, format="json")

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_SPACE"
        lesson.refresh_from_db()
        assert lesson.space == 5

    def test_update_to_largest_storable_values(self, api_client: APIClient):
        """Given price and space at the integer limit, returns 200."""
        lesson = _create_lesson()

        response = api_client.put(
            f"/lessons/{lesson.pk}",
            {"price": 2_147_483_647, "space": 2_147_483_647},
            format="json",
        )

        assert response.status_code == 200
        lesson.refresh_from_db()
        assert lesson.price == 2_147_483_647

    def test_order_total_too_large_is_rolled_back(self, api_client: APIClient):
        """Given a total beyond the storable range, returns 400 and restores spaces."""
        lesson = _create_lesson(price=2_147_483_647, space=5)

        response = api_client.post(
            "/orders",
            {"name": "Ada", "phone": "0123", "lessons": [{"lessonId": str(lesson.pk), "quantity": 2}]},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"] == "ORDER_TOTAL_TOO_LARGE"
        lesson.refresh_from_db()
        assert lesson.space == 5
        assert models.Order.objects.count() == 0

    def test_update_malformed_id(self, api_client: APIClient):
        """Given a malformed id, returns 400 INVALID_LESSON_ID."""
        response = api_client.put("/lessons/not-an-id", {"price": 1}, format="json")

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_LESSON_ID"

    def test_update_unknown_lesson(self, api_client: APIClient):
        """Given an unknown id, returns 404."""
        response = api_client.put(f"/lessons/{uuid.uuid4()}", {"price": 1}, format="json")

        assert response.status_code == 404


@pytest.mark.django_db
class TestUnknownEndpoint:
    """Tests for the JSON 404 handler."""

    def test_unknown_path(self, api_client: APIClient):
        """Given an unknown path, returns 404 listing the endpoints."""
        response = api_client.get("/nowhere")

        assert response.status_code == 404
        assert "GET /lessons" in response.json()["availableEndpoints"]


@pytest.mark.django_db
class TestMemoryBackend:
    """The same API served from the in-memory stores."""

    def test_default_catalog_and_order(self, api_client: APIClient, memory_backend):
        """Given the memory backend, serves the default catalog and books from it."""
        lessons = api_client.get("/lessons").json()
        assert len(lessons) == 10
        assert lessons[0]["id"] == "1"

        response = api_client.post(
            "/orders",
            {"name": "Ada", "phone": "0123", "lessons": [{"lessonId": 1, "quantity": 5}]},
            format="json",
        )
        assert response.status_code == 201
        assert response.json()["order"]["totalAmount"] == 500

        again = api_client.post(
            "/orders",
            {"name": "Ada", "phone": "0123", "lessons": [{"lessonId": 1, "quantity": 1}]},
            format="json",
        )
        assert again.status_code == 400
        assert api_client.get("/lessons").json()[0]["space"] == 0
