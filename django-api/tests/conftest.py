"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from catalog.domain import Capacity, LessonDraft, Money
from catalog.stores import reset_memory_stores
from catalog.stores.memory_store import InMemoryLessonStore, InMemoryOrderStore


def _lesson_draft(
    subject: str = "Mathematics",
    location: str = "Hendon",
    price: int = 100,
    space: int = 5,
    image: str = "math-hendon.jpg",
) -> LessonDraft:
    return LessonDraft(
        subject=subject,
        location=location,
        price=Money(price),
        space=Capacity(space),
        image=image,
    )


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_draft():
    return _lesson_draft


@pytest.fixture
def lesson_store() -> InMemoryLessonStore:
    return InMemoryLessonStore()


@pytest.fixture
def order_store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def memory_backend(settings):
    """Route the API through fresh process-owned in-memory stores."""
    settings.CATALOG_STORE_BACKEND = "memory"
    reset_memory_stores()
    yield
    reset_memory_stores()
