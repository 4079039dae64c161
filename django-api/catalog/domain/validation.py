"""Syntactic checks applied before any store access.

The ``is_valid_*`` predicates are pure. The ``parse_*`` helpers build domain
objects from raw request values and raise ``ValidationError`` on the first
problem, so callers never perform partial writes.
"""

import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from catalog.domain.errors import ErrorCode, ValidationError
from catalog.domain.models import LessonPatch
from catalog.domain.value_objects import Capacity, Money, Quantity

NAME_PATTERN = re.compile(r"[A-Za-z\s]+")
PHONE_PATTERN = re.compile(r"[0-9]+")

_TEXT_FIELDS = ("subject", "location", "image")
_IGNORED_FIELDS = frozenset({"id", "_id"})

# Largest value every supported database accepts in a PositiveIntegerField.
MAX_AMOUNT = 2_147_483_647


def is_valid_name(value: object) -> bool:
    return isinstance(value, str) and NAME_PATTERN.fullmatch(value) is not None


def is_valid_phone(value: object) -> bool:
    return isinstance(value, str) and PHONE_PATTERN.fullmatch(value) is not None


def _is_non_negative_count(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        return False
    return 0 <= value <= MAX_AMOUNT


def is_valid_price_update(value: object) -> bool:
    return _is_non_negative_count(value)


def is_valid_space_update(value: object) -> bool:
    return _is_non_negative_count(value)


@dataclass(frozen=True)
class RequestedItem:
    """A validated line item before any reservation has been attempted."""

    lesson_id: str
    quantity: Quantity


def parse_line_items(raw: object) -> tuple[RequestedItem, ...]:
    """Validate the ``lessons`` array of an order request."""
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or not raw:
        raise ValidationError(
            code=ErrorCode.INVALID_LINE_ITEMS,
            message="Lessons must be a non-empty array",
        )

    items = []
    for position, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            raise ValidationError(
                code=ErrorCode.INVALID_LINE_ITEMS,
                message=f"Lesson entry {position} must be an object",
            )
        lesson_id = entry.get("lessonId")
        if isinstance(lesson_id, int) and not isinstance(lesson_id, bool):
            lesson_id = str(lesson_id)
        if not isinstance(lesson_id, str) or not lesson_id.strip():
            raise ValidationError(
                code=ErrorCode.INVALID_LINE_ITEMS,
                message=f"Lesson entry {position} is missing a lessonId",
            )
        quantity = entry.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError(
                code=ErrorCode.INVALID_LINE_ITEMS,
                message=f"Lesson entry {position} quantity must be a positive integer",
            )
        items.append(RequestedItem(lesson_id=lesson_id.strip(), quantity=Quantity(quantity)))
    return tuple(items)


def validate_order_total(total: Money) -> None:
    if total.amount > MAX_AMOUNT:
        raise ValidationError(
            code=ErrorCode.ORDER_TOTAL_TOO_LARGE,
            message=f"Order total cannot exceed {MAX_AMOUNT}",
        )


def validate_customer(name: object, phone: object) -> None:
    if not is_valid_name(name):
        raise ValidationError(
            code=ErrorCode.INVALID_NAME,
            message="Name must contain only letters and spaces",
        )
    if not is_valid_phone(phone):
        raise ValidationError(
            code=ErrorCode.INVALID_PHONE,
            message="Phone must contain only numbers",
        )


def parse_lesson_patch(payload: object) -> LessonPatch:
    """Validate a partial lesson update payload."""
    if not isinstance(payload, Mapping):
        raise ValidationError(
            code=ErrorCode.INVALID_FIELD,
            message="Update body must be an object",
        )

    unknown = set(payload) - set(_TEXT_FIELDS) - {"price", "space"} - _IGNORED_FIELDS
    if unknown:
        raise ValidationError(
            code=ErrorCode.INVALID_FIELD,
            message=f"Unknown lesson field(s): {', '.join(sorted(unknown))}",
        )

    changes: dict[str, object] = {}
    for name in _TEXT_FIELDS:
        if name in payload:
            if not isinstance(payload[name], str):
                raise ValidationError(
                    code=ErrorCode.INVALID_FIELD,
                    message=f"{name.capitalize()} must be a string",
                )
            changes[name] = payload[name]

    if "price" in payload:
        if not is_valid_price_update(payload["price"]):
            raise ValidationError(
                code=ErrorCode.INVALID_PRICE,
                message=f"Price must be a number between 0 and {MAX_AMOUNT}",
            )
        changes["price"] = Money(int(payload["price"]))

    if "space" in payload:
        if not is_valid_space_update(payload["space"]):
            raise ValidationError(
                code=ErrorCode.INVALID_SPACE,
                message=f"Space must be a number between 0 and {MAX_AMOUNT}",
            )
        changes["space"] = Capacity(int(payload["space"]))

    return LessonPatch(**changes)
