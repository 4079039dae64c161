"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True, order=True)
class LessonId:
    """Opaque identifier for a Lesson.

    Backends issue different formats (UUIDs, sequential integers); the
    domain only compares them.
    """

    value: str

    @classmethod
    def from_string(cls, value: str) -> Self:
        value = value.strip()
        if not value:
            raise ValueError("Lesson id cannot be blank")
        return cls(value=value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class OrderId:
    """Opaque identifier for an Order."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Price in minor units."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def times(self, quantity: "Quantity") -> "Money":
        return Money(self.amount * quantity.value)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing remaining space."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Quantity:
    """Positive number of places requested on a line item."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Quantity must be positive")
