"""Store selection.

``CATALOG_STORE_BACKEND`` picks the backend: "django" (ORM, default) or
"memory" (process-owned stores seeded with the default catalog).
"""

from functools import cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from catalog.domain.defaults import DEFAULT_LESSONS
from catalog.stores.django_store import DjangoLessonStore, DjangoOrderStore
from catalog.stores.interfaces import (
    LessonStore,
    OrderStore,
    ReserveResult,
    ReserveStatus,
)
from catalog.stores.memory_store import InMemoryLessonStore, InMemoryOrderStore

__all__ = [
    "LessonStore",
    "OrderStore",
    "ReserveResult",
    "ReserveStatus",
    "get_lesson_store",
    "get_order_store",
    "reset_memory_stores",
]


@cache
def _memory_stores() -> tuple[InMemoryLessonStore, InMemoryOrderStore]:
    return InMemoryLessonStore(DEFAULT_LESSONS), InMemoryOrderStore()


def _backend() -> str:
    backend = getattr(settings, "CATALOG_STORE_BACKEND", "django")
    if backend not in ("django", "memory"):
        raise ImproperlyConfigured(f"Unknown CATALOG_STORE_BACKEND: {backend!r}")
    return backend


def get_lesson_store() -> LessonStore:
    if _backend() == "memory":
        return _memory_stores()[0]
    return DjangoLessonStore()


def get_order_store() -> OrderStore:
    if _backend() == "memory":
        return _memory_stores()[1]
    return DjangoOrderStore()


def reset_memory_stores() -> None:
    """Drop the in-memory stores so the next access starts from the default catalog."""
    _memory_stores.cache_clear()
