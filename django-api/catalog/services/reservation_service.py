"""Reservation service - turns an order request into a committed Order.

Stores offer per-lesson atomicity only. A multi-lesson order is a sequence
of conditional decrements; if any step fails, every decrement made so far
is released in reverse order before the error propagates.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from catalog.domain import LineItem, Order, OrderDraft
from catalog.domain.errors import CapacityError, LessonNotFoundError
from catalog.domain.validation import (
    RequestedItem,
    parse_line_items,
    validate_customer,
    validate_order_total,
)
from catalog.stores.interfaces import LessonStore, OrderStore, ReserveStatus

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ReservationService:
    """Service for placing and listing orders."""

    def __init__(
        self,
        lesson_store: LessonStore,
        order_store: OrderStore,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._lessons = lesson_store
        self._orders = order_store
        self._clock = clock

    def list_orders(self) -> list[Order]:
        """Return all committed orders."""
        return self._orders.list_orders()

    def place_order(self, name: object, phone: object, line_items: object) -> Order:
        """Reserve every line item and append the order, or change nothing.

        Raises:
            ValidationError: If name, phone or line items are malformed, or the
                total is too large to record.
            LessonNotFoundError: If a line item references an unknown lesson.
            CapacityError: If a lesson has fewer spaces than requested.
            StorageError: If a store cannot be read or written.
        """
        validate_customer(name, phone)
        requested = parse_line_items(line_items)

        reserved: list[LineItem] = []
        try:
            for item in requested:
                reserved.append(self._reserve(item))
            draft = OrderDraft(
                customer_name=name,
                customer_phone=phone,
                line_items=tuple(reserved),
                created_at=self._clock(),
            )
            validate_order_total(draft.total_amount)
            order = self._orders.add_order(draft)
        except BaseException:
            self._rollback(reserved)
            raise

        logger.info(
            "Order %s confirmed: %d line item(s), total %s",
            order.id,
            len(order.line_items),
            order.total_amount,
        )
        return order

    def _reserve(self, item: RequestedItem) -> LineItem:
        try:
            lesson_id = self._lessons.parse_id(item.lesson_id)
        except ValueError:
            raise LessonNotFoundError(item.lesson_id) from None

        result = self._lessons.try_reserve(lesson_id, item.quantity.value)
        if result.status is ReserveStatus.NOT_FOUND:
            raise LessonNotFoundError(item.lesson_id)
        if result.status is ReserveStatus.INSUFFICIENT_CAPACITY:
            lesson = result.lesson
            logger.warning(
                "Lesson %s has %s space(s), %d requested",
                lesson.id,
                lesson.space,
                item.quantity.value,
            )
            raise CapacityError(lesson.subject, lesson.location)
        return LineItem(
            lesson_id=lesson_id,
            quantity=item.quantity,
            unit_price=result.lesson.price,
        )

    def _rollback(self, reserved: list[LineItem]) -> None:
        if reserved:
            logger.info("Rolling back %d reservation(s)", len(reserved))
        for item in reversed(reserved):
            try:
                self._lessons.release(item.lesson_id, item.quantity.value)
            except Exception:
                logger.exception(
                    "Failed to release %d space(s) on lesson %s",
                    item.quantity.value,
                    item.lesson_id,
                )

