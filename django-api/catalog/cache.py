"""Cache keys for the lesson listing.

Snapshots are stored under a versioned key. Invalidation bumps the version
instead of deleting the snapshot, so a listing that was read before a write
can only ever be stored under the version it was read at.
"""

import time

from django.conf import settings
from django.core.cache import cache

LESSON_LIST_VERSION_KEY = "lessons:list:version"


def lesson_list_key(version: int) -> str:
    return f"lessons:list:v{version}"


def current_version() -> int:
    version = cache.get(LESSON_LIST_VERSION_KEY)
    if version is None:
        cache.add(LESSON_LIST_VERSION_KEY, time.time_ns(), timeout=None)
        version = cache.get(LESSON_LIST_VERSION_KEY)
    return version


def get_lesson_list(version: int):
    return cache.get(lesson_list_key(version))


def set_lesson_list(version: int, payload) -> None:
    cache.set(lesson_list_key(version), payload, timeout=settings.CATALOG_CACHE_TIMEOUT)


def invalidate_lessons() -> None:
    try:
        cache.incr(LESSON_LIST_VERSION_KEY)
    except ValueError:
        # Version key was evicted; restart from a value no older snapshot used.
        cache.set(LESSON_LIST_VERSION_KEY, time.time_ns(), timeout=None)
