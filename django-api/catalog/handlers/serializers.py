"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class LessonSerializer(serializers.Serializer):
    """Serializer for Lesson domain model."""

    id = serializers.CharField(source="id.value")
    subject = serializers.CharField()
    location = serializers.CharField()
    price = serializers.IntegerField(source="price.amount")
    space = serializers.IntegerField(source="space.value")
    image = serializers.CharField()


class LineItemSerializer(serializers.Serializer):
    """Serializer for LineItem domain model."""

    lessonId = serializers.CharField(source="lesson_id.value")
    quantity = serializers.IntegerField(source="quantity.value")
    unitPrice = serializers.IntegerField(source="unit_price.amount")


class OrderSerializer(serializers.Serializer):
    """Serializer for Order domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField(source="customer_name")
    phone = serializers.CharField(source="customer_phone")
    lessons = LineItemSerializer(source="line_items", many=True)
    totalAmount = serializers.IntegerField(source="total_amount.amount")
    createdAt = serializers.DateTimeField(source="created_at")
    status = serializers.CharField(source="status.value")


class SearchResultSerializer(serializers.Serializer):
    """Serializer for SearchResult domain model."""

    query = serializers.CharField()
    results = LessonSerializer(many=True)
    count = serializers.IntegerField()
