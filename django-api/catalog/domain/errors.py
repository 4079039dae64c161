"""Domain error codes for the catalog module."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Broad failure classes, mapped to HTTP statuses by the handlers."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CAPACITY = "capacity"
    STORAGE = "storage"


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_NAME = "INVALID_NAME"
    INVALID_PHONE = "INVALID_PHONE"
    INVALID_LINE_ITEMS = "INVALID_LINE_ITEMS"
    INVALID_PRICE = "INVALID_PRICE"
    INVALID_SPACE = "INVALID_SPACE"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_LESSON_ID = "INVALID_LESSON_ID"
    MISSING_QUERY = "MISSING_QUERY"
    ORDER_TOTAL_TOO_LARGE = "ORDER_TOTAL_TOO_LARGE"
    LESSON_NOT_FOUND = "LESSON_NOT_FOUND"
    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    kind = ErrorKind.VALIDATION

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when input fails a syntactic check. Nothing is written."""

    kind = ErrorKind.VALIDATION


class InvalidLessonIdError(ValidationError):
    """Raised when a lesson ID is not in a format the store issues."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_LESSON_ID,
            message="Invalid lesson ID format",
        )


class LessonNotFoundError(DomainError):
    """Raised when a lesson is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, lesson_id: str) -> None:
        super().__init__(
            code=ErrorCode.LESSON_NOT_FOUND,
            message=f"Lesson with ID {lesson_id} not found",
        )


class CapacityError(DomainError):
    """Raised when a lesson has fewer spaces left than requested."""

    kind = ErrorKind.CAPACITY

    def __init__(self, subject: str, location: str) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_CAPACITY,
            message=f"Not enough spaces available for {subject} in {location}",
        )


class StorageError(DomainError):
    """Raised when the backing store cannot be read or written."""

    kind = ErrorKind.STORAGE

    def __init__(self, message: str = "Storage is unavailable") -> None:
        super().__init__(code=ErrorCode.STORAGE_UNAVAILABLE, message=message)
