from django.urls import path

from catalog.handlers import (
    HealthView,
    LessonDetailView,
    LessonListView,
    LessonSearchView,
    OrderListView,
)

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("lessons", LessonListView.as_view(), name="lesson-list"),
    path("lessons/<str:lesson_id>", LessonDetailView.as_view(), name="lesson-detail"),
    path("search", LessonSearchView.as_view(), name="lesson-search"),
    path("orders", OrderListView.as_view(), name="order-list"),
]
