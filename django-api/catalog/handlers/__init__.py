from catalog.handlers.views import (
    HealthView,
    LessonDetailView,
    LessonListView,
    LessonSearchView,
    OrderListView,
    endpoint_not_found,
)

__all__ = [
    "HealthView",
    "LessonDetailView",
    "LessonListView",
    "LessonSearchView",
    "OrderListView",
    "endpoint_not_found",
]
