"""Django signals for cache invalidation.

Capacity changes go through QuerySet.update() and bypass these signals;
the handlers invalidate explicitly after every order attempt.
"""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from catalog.cache import invalidate_lessons
from catalog.models import Lesson


@receiver([post_save, post_delete], sender=Lesson)
def invalidate_lesson_cache(sender, instance, **kwargs):
    """Invalidate the lesson listing when a lesson is saved or deleted."""
    invalidate_lessons()
