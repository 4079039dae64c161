"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in catalog/models.py (persistence layer).
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from catalog.domain.value_objects import Capacity, LessonId, Money, OrderId, Quantity


@dataclass(frozen=True)
class Lesson:
    """Domain representation of a bookable Lesson."""

    id: LessonId
    subject: str
    location: str
    price: Money
    space: Capacity
    image: str = ""


@dataclass(frozen=True)
class LessonDraft:
    """A Lesson that has not been assigned an id yet."""

    subject: str
    location: str
    price: Money
    space: Capacity
    image: str = ""


@dataclass(frozen=True)
class LessonPatch:
    """Field-level overwrite for a Lesson. None means "leave unchanged"."""

    subject: str | None = None
    location: str | None = None
    price: Money | None = None
    space: Capacity | None = None
    image: str | None = None

    def changes(self) -> dict[str, object]:
        return {
            name: value
            for name, value in (
                ("subject", self.subject),
                ("location", self.location),
                ("price", self.price),
                ("space", self.space),
                ("image", self.image),
            )
            if value is not None
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def apply_to(self, lesson: Lesson) -> Lesson:
        return replace(lesson, **self.changes())


def lesson_matches(lesson: Lesson, term: str) -> bool:
    """Case-insensitive substring match over text and numeric fields.

    Numbers are matched by their decimal text, so "90" matches 90 and 190.
    """
    needle = term.lower()
    return (
        needle in lesson.subject.lower()
        or needle in lesson.location.lower()
        or needle in str(lesson.price.amount)
        or needle in str(lesson.space.value)
    )


class OrderStatus(Enum):
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class LineItem:
    """One booked lesson with the price in effect when it was reserved."""

    lesson_id: LessonId
    quantity: Quantity
    unit_price: Money

    @property
    def subtotal(self) -> Money:
        return self.unit_price.times(self.quantity)


@dataclass(frozen=True)
class OrderDraft:
    """An Order ready to be appended to the ledger."""

    customer_name: str
    customer_phone: str
    line_items: tuple[LineItem, ...]
    created_at: datetime
    status: OrderStatus = OrderStatus.CONFIRMED
    total_amount: Money = field(init=False)

    def __post_init__(self) -> None:
        total = Money(0)
        for item in self.line_items:
            total = total + item.subtotal
        object.__setattr__(self, "total_amount", total)


@dataclass(frozen=True)
class Order:
    """Domain representation of a committed Order."""

    id: OrderId
    customer_name: str
    customer_phone: str
    line_items: tuple[LineItem, ...]
    total_amount: Money
    created_at: datetime
    status: OrderStatus

    @classmethod
    def from_draft(cls, order_id: OrderId, draft: OrderDraft) -> "Order":
        return cls(
            id=order_id,
            customer_name=draft.customer_name,
            customer_phone=draft.customer_phone,
            line_items=draft.line_items,
            total_amount=draft.total_amount,
            created_at=draft.created_at,
            status=draft.status,
        )


@dataclass(frozen=True)
class SearchResult:
    """Lessons matching a search term."""

    query: str
    results: tuple[Lesson, ...]

    @property
    def count(self) -> int:
        return len(self.results)
