"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from catalog.domain import Lesson, LessonDraft, LessonId, LessonPatch, Order, OrderDraft


class ReserveStatus(Enum):
    RESERVED = "reserved"
    INSUFFICIENT_CAPACITY = "insufficient_capacity"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ReserveResult:
    """Outcome of a conditional decrement.

    ``lesson`` is the state observed inside the same atomic step: after the
    decrement when reserved, unchanged when capacity was insufficient, and
    None when the lesson does not exist.
    """

    status: ReserveStatus
    lesson: Lesson | None = None

    @property
    def reserved(self) -> bool:
        return self.status is ReserveStatus.RESERVED


class LessonStore(ABC):
    """Interface for lesson persistence operations.

    ``try_reserve``, ``release`` and ``update_lesson`` must be serialized
    relative to each other for the same lesson id.
    """

    @abstractmethod
    def parse_id(self, raw: str) -> LessonId:
        """Return the id for raw, or raise ValueError if this store could not have issued it."""
        ...

    @abstractmethod
    def list_lessons(self) -> list[Lesson]:
        """Return all lessons."""
        ...

    @abstractmethod
    def get_lesson(self, lesson_id: LessonId) -> Lesson | None:
        """Return a lesson by ID, or None if not found."""
        ...

    @abstractmethod
    def search_lessons(self, term: str) -> list[Lesson]:
        """Return lessons matching term (see ``lesson_matches``)."""
        ...

    @abstractmethod
    def try_reserve(self, lesson_id: LessonId, quantity: int) -> ReserveResult:
        """Atomically decrement space by quantity if at least quantity remains."""
        ...

    @abstractmethod
    def release(self, lesson_id: LessonId, quantity: int) -> None:
        """Atomically add quantity back to space. Used for rollback only."""
        ...

    @abstractmethod
    def update_lesson(self, lesson_id: LessonId, patch: LessonPatch) -> Lesson | None:
        """Apply patch and return the refreshed lesson, or None if not found."""
        ...

    @abstractmethod
    def add_lesson(self, draft: LessonDraft) -> Lesson:
        """Insert a new lesson and assign its id."""
        ...


class OrderStore(ABC):
    """Interface for the append-only order ledger."""

    @abstractmethod
    def add_order(self, draft: OrderDraft) -> Order:
        """Append an order and assign its id."""
        ...

    @abstractmethod
    def list_orders(self) -> list[Order]:
        """Return all orders, oldest first."""
        ...
