"""Catalog service - listing, search and administrative updates.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping

from catalog.domain import Lesson, LessonId, SearchResult
from catalog.domain.errors import (
    ErrorCode,
    InvalidLessonIdError,
    LessonNotFoundError,
    ValidationError,
)
from catalog.domain.validation import parse_lesson_patch
from catalog.stores.interfaces import LessonStore

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for lesson catalog operations."""

    def __init__(self, store: LessonStore) -> None:
        self._store = store

    def list_lessons(self) -> list[Lesson]:
        """Return all lessons."""
        return self._store.list_lessons()

    def get_lesson(self, lesson_id: str) -> Lesson:
        """Return a lesson by ID.

        Raises:
            InvalidLessonIdError: If lesson_id is not in the store's id format.
            LessonNotFoundError: If the lesson does not exist.
        """
        parsed = self._parse_id(lesson_id)
        lesson = self._store.get_lesson(parsed)
        if lesson is None:
            raise LessonNotFoundError(lesson_id)
        return lesson

    def search(self, term: str | None) -> SearchResult:
        """Return lessons whose text or numeric fields contain term.

        Raises:
            ValidationError: If term is missing or blank.
        """
        if term is None or not term.strip():
            raise ValidationError(
                code=ErrorCode.MISSING_QUERY,
                message='Search query parameter "q" is required',
            )
        results = self._store.search_lessons(term)
        return SearchResult(query=term, results=tuple(results))

    def update_lesson(self, lesson_id: str, payload: Mapping[str, object]) -> Lesson:
        """Overwrite the given fields of a lesson.

        Raises:
            InvalidLessonIdError: If lesson_id is not in the store's id format.
            LessonNotFoundError: If the lesson does not exist.
            ValidationError: If a field is malformed or price/space is negative.
        """
        current = self.get_lesson(lesson_id)
        patch = parse_lesson_patch(payload)
        if patch.is_empty():
            return current

        updated = self._store.update_lesson(current.id, patch)
        if updated is None:
            raise LessonNotFoundError(lesson_id)
        logger.info("Lesson %s updated: %s", updated.id, ", ".join(patch.changes()))
        return updated

    def _parse_id(self, raw: str) -> LessonId:
        try:
            return self._store.parse_id(raw)
        except ValueError as exc:
            raise InvalidLessonIdError() from exc
