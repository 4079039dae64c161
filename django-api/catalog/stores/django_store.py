"""Django ORM implementation of the lesson and order stores.

Capacity changes are single conditional UPDATE statements, so the check and
the decrement cannot be separated by another writer on any backend.
"""

import logging
from uuid import UUID

from django.db import DatabaseError, transaction
from django.db.models import CharField, F, Q
from django.db.models.functions import Cast
from django.utils import timezone

from catalog import models
from catalog.domain import (
    Capacity,
    Lesson,
    LessonDraft,
    LessonId,
    LessonPatch,
    LineItem,
    Money,
    Order,
    OrderDraft,
    OrderId,
    OrderStatus,
    Quantity,
)
from catalog.domain.errors import StorageError
from catalog.stores.interfaces import LessonStore, OrderStore, ReserveResult, ReserveStatus

logger = logging.getLogger(__name__)


def _lesson_to_domain(row: models.Lesson) -> Lesson:
    return Lesson(
        id=LessonId(str(row.pk)),
        subject=row.subject,
        location=row.location,
        price=Money(row.price),
        space=Capacity(row.space),
        image=row.image,
    )


def _order_to_domain(row: models.Order) -> Order:
    return Order(
        id=OrderId(str(row.pk)),
        customer_name=row.customer_name,
        customer_phone=row.customer_phone,
        line_items=tuple(
            LineItem(
                lesson_id=LessonId(item.lesson_id),
                quantity=Quantity(item.quantity),
                unit_price=Money(item.unit_price),
            )
            for item in row.line_items.all()
        ),
        total_amount=Money(row.total_amount),
        created_at=row.created_at,
        status=OrderStatus(row.status),
    )


class DjangoLessonStore(LessonStore):
    """Lesson store backed by the Django ORM."""

    def parse_id(self, raw: str) -> LessonId:
        return LessonId(str(UUID(raw.strip())))

    def list_lessons(self) -> list[Lesson]:
        try:
            return [_lesson_to_domain(row) for row in models.Lesson.objects.all()]
        except DatabaseError as exc:
            logger.exception("Failed to list lessons")
            raise StorageError() from exc

    def get_lesson(self, lesson_id: LessonId) -> Lesson | None:
        try:
            row = models.Lesson.objects.filter(pk=lesson_id.value).first()
        except DatabaseError as exc:
            logger.exception("Failed to load lesson %s", lesson_id)
            raise StorageError() from exc
        return _lesson_to_domain(row) if row is not None else None

    def search_lessons(self, term: str) -> list[Lesson]:
        queryset = models.Lesson.objects.annotate(
            price_text=Cast("price", output_field=CharField()),
            space_text=Cast("space", output_field=CharField()),
        ).filter(
            Q(subject__icontains=term)
            | Q(location__icontains=term)
            | Q(price_text__contains=term)
            | Q(space_text__contains=term)
        )
        try:
            return [_lesson_to_domain(row) for row in queryset]
        except DatabaseError as exc:
            logger.exception("Failed to search lessons for %r", term)
            raise StorageError() from exc

    def try_reserve(self, lesson_id: LessonId, quantity: int) -> ReserveResult:
        try:
            with transaction.atomic():
                updated = models.Lesson.objects.filter(
                    pk=lesson_id.value, space__gte=quantity
                ).update(space=F("space") - quantity, updated_at=timezone.now())
                row = models.Lesson.objects.filter(pk=lesson_id.value).first()
        except DatabaseError as exc:
            logger.exception("Failed to reserve %s x %d", lesson_id, quantity)
            raise StorageError() from exc

        if row is None:
            return ReserveResult(ReserveStatus.NOT_FOUND)
        if not updated:
            return ReserveResult(ReserveStatus.INSUFFICIENT_CAPACITY, _lesson_to_domain(row))
        return ReserveResult(ReserveStatus.RESERVED, _lesson_to_domain(row))

    def release(self, lesson_id: LessonId, quantity: int) -> None:
        try:
            models.Lesson.objects.filter(pk=lesson_id.value).update(
                space=F("space") + quantity, updated_at=timezone.now()
            )
        except DatabaseError as exc:
            raise StorageError() from exc

    def update_lesson(self, lesson_id: LessonId, patch: LessonPatch) -> Lesson | None:
        try:
            with transaction.atomic():
                row = models.Lesson.objects.select_for_update().filter(pk=lesson_id.value).first()
                if row is None:
                    return None
                for name, value in patch.changes().items():
                    if isinstance(value, Money):
                        value = value.amount
                    elif isinstance(value, Capacity):
                        value = value.value
                    setattr(row, name, value)
                row.save()
        except DatabaseError as exc:
            logger.exception("Failed to update lesson %s", lesson_id)
            raise StorageError() from exc
        return _lesson_to_domain(row)

    def add_lesson(self, draft: LessonDraft) -> Lesson:
        try:
            row = models.Lesson.objects.create(
                subject=draft.subject,
                location=draft.location,
                price=draft.price.amount,
                space=draft.space.value,
                image=draft.image,
            )
        except DatabaseError as exc:
            raise StorageError() from exc
        return _lesson_to_domain(row)


class DjangoOrderStore(OrderStore):
    """Order ledger backed by the Django ORM."""

    def add_order(self, draft: OrderDraft) -> Order:
        try:
            with transaction.atomic():
                row = models.Order.objects.create(
                    customer_name=draft.customer_name,
                    customer_phone=draft.customer_phone,
                    total_amount=draft.total_amount.amount,
                    status=draft.status.value,
                    created_at=draft.created_at,
                )
                models.OrderLineItem.objects.bulk_create(
                    models.OrderLineItem(
                        order=row,
                        position=position,
                        lesson_id=item.lesson_id.value,
                        quantity=item.quantity.value,
                        unit_price=item.unit_price.amount,
                    )
                    for position, item in enumerate(draft.line_items)
                )
        except DatabaseError as exc:
            logger.exception("Failed to append order for %s", draft.customer_name)
            raise StorageError() from exc
        return Order.from_draft(OrderId(str(row.pk)), draft)

    def list_orders(self) -> list[Order]:
        try:
            rows = models.Order.objects.prefetch_related("line_items")
            return [_order_to_domain(row) for row in rows]
        except DatabaseError as exc:
            logger.exception("Failed to list orders")
            raise StorageError() from exc
