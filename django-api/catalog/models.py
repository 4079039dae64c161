"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Lesson(models.Model):
    """Persistence model for bookable lessons."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    subject = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    price = models.PositiveIntegerField()
    space = models.PositiveIntegerField()
    image = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(space__gte=0), name="lesson_space_non_negative"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.subject} - {self.location}"


class Order(models.Model):
    """Persistence model for confirmed orders."""

    class Status(models.TextChoices):
        CONFIRMED = "confirmed", "Confirmed"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer_name = models.CharField(max_length=255)
    customer_phone = models.CharField(max_length=32)
    total_amount = models.PositiveIntegerField()
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.CONFIRMED
    )
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="catalog_order_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.customer_name} - {self.total_amount}"


class OrderLineItem(models.Model):
    """Persistence model for one booked lesson within an order.

    lesson_id is stored by value; later lesson edits never touch past orders.
    """

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="line_items")
    position = models.PositiveSmallIntegerField()
    lesson_id = models.CharField(max_length=64)
    quantity = models.PositiveIntegerField()
    unit_price = models.PositiveIntegerField()

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["order", "position"], name="unique_line_item_position"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.lesson_id} x {self.quantity}"
