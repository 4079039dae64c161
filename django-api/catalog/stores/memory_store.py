"""Thread-safe in-memory stores.

Each lesson id has its own lock, so reservations against different lessons
run in parallel while reservations against the same lesson are serialized.
"""

import threading
from collections.abc import Iterable
from dataclasses import replace

from catalog.domain import (
    Capacity,
    Lesson,
    LessonDraft,
    LessonId,
    LessonPatch,
    Order,
    OrderDraft,
    OrderId,
    lesson_matches,
)
from catalog.stores.interfaces import LessonStore, OrderStore, ReserveResult, ReserveStatus


class InMemoryLessonStore(LessonStore):
    """Lesson store backed by a dict, with sequential integer ids."""

    def __init__(self, lessons: Iterable[LessonDraft] = ()) -> None:
        self._registry_lock = threading.Lock()
        self._lessons: dict[LessonId, Lesson] = {}
        self._locks: dict[LessonId, threading.Lock] = {}
        self._next_id = 1
        for draft in lessons:
            self.add_lesson(draft)

    def parse_id(self, raw: str) -> LessonId:
        raw = raw.strip()
        if not raw.isdigit():
            raise ValueError(f"Not an in-memory lesson id: {raw!r}")
        return LessonId(str(int(raw)))

    def list_lessons(self) -> list[Lesson]:
        with self._registry_lock:
            return list(self._lessons.values())

    def get_lesson(self, lesson_id: LessonId) -> Lesson | None:
        return self._lessons.get(lesson_id)

    def search_lessons(self, term: str) -> list[Lesson]:
        return [lesson for lesson in self.list_lessons() if lesson_matches(lesson, term)]

    def try_reserve(self, lesson_id: LessonId, quantity: int) -> ReserveResult:
        lock = self._locks.get(lesson_id)
        if lock is None:
            return ReserveResult(ReserveStatus.NOT_FOUND)
        with lock:
            lesson = self._lessons[lesson_id]
            if lesson.space.value < quantity:
                return ReserveResult(ReserveStatus.INSUFFICIENT_CAPACITY, lesson)
            lesson = replace(lesson, space=Capacity(lesson.space.value - quantity))
            self._lessons[lesson_id] = lesson
            return ReserveResult(ReserveStatus.RESERVED, lesson)

    def release(self, lesson_id: LessonId, quantity: int) -> None:
        with self._locks[lesson_id]:
            lesson = self._lessons[lesson_id]
            self._lessons[lesson_id] = replace(
                lesson, space=Capacity(lesson.space.value + quantity)
            )

    def update_lesson(self, lesson_id: LessonId, patch: LessonPatch) -> Lesson | None:
        lock = self._locks.get(lesson_id)
        if lock is None:
            return None
        with lock:
            lesson = patch.apply_to(self._lessons[lesson_id])
            self._lessons[lesson_id] = lesson
            return lesson

    def add_lesson(self, draft: LessonDraft) -> Lesson:
        with self._registry_lock:
            lesson_id = LessonId(str(self._next_id))
            self._next_id += 1
            lesson = Lesson(
                id=lesson_id,
                subject=draft.subject,
                location=draft.location,
                price=draft.price,
                space=draft.space,
                image=draft.image,
            )
            self._locks[lesson_id] = threading.Lock()
            self._lessons[lesson_id] = lesson
            return lesson


class InMemoryOrderStore(OrderStore):
    """Append-only order ledger backed by a list."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._orders: list[Order] = []

    def add_order(self, draft: OrderDraft) -> Order:
        with self._lock:
            order = Order.from_draft(OrderId(str(len(self._orders) + 1)), draft)
            self._orders.append(order)
            return order

    def list_orders(self) -> list[Order]:
        with self._lock:
            return list(self._orders)
