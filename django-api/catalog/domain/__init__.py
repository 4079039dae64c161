from catalog.domain.models import (
    Lesson,
    LessonDraft,
    LessonPatch,
    LineItem,
    Order,
    OrderDraft,
    OrderStatus,
    SearchResult,
    lesson_matches,
)
from catalog.domain.value_objects import Capacity, LessonId, Money, OrderId, Quantity

__all__ = [
    "Lesson",
    "LessonDraft",
    "LessonPatch",
    "LineItem",
    "Order",
    "OrderDraft",
    "OrderStatus",
    "SearchResult",
    "lesson_matches",
    "LessonId",
    "OrderId",
    "Money",
    "Capacity",
    "Quantity",
]
