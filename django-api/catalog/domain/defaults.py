"""Starter catalog used to seed an empty store."""

from catalog.domain.models import LessonDraft
from catalog.domain.value_objects import Capacity, Money


def _lesson(subject: str, location: str, price: int, space: int, image: str) -> LessonDraft:
    return LessonDraft(
        subject=subject,
        location=location,
        price=Money(price),
        space=Capacity(space),
        image=image,
    )


DEFAULT_LESSONS: tuple[LessonDraft, ...] = (
    _lesson("Mathematics", "Hendon", 100, 5, "math-hendon.jpg"),
    _lesson("Mathematics", "Colindale", 80, 2, "math-colindale.jpg"),
    _lesson("Mathematics", "Brent Cross", 90, 6, "math-brentcross.jpg"),
    _lesson("Mathematics", "Golders Green", 95, 7, "math-goldersgreen.jpg"),
    _lesson("English Literature", "Hendon", 85, 4, "english-hendon.jpg"),
    _lesson("English Literature", "Colindale", 75, 3, "english-colindale.jpg"),
    _lesson("Science", "Brent Cross", 110, 5, "science-brentcross.jpg"),
    _lesson("Science", "Golders Green", 105, 6, "science-goldersgreen.jpg"),
    _lesson("Art", "Hendon", 70, 8, "art-hendon.jpg"),
    _lesson("Music", "Colindale", 90, 4, "music-colindale.jpg"),
)
