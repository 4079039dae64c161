"""Tests for the seed_lessons management command.

Run with: pytest tests/test_seed_command.py -v
"""

from io import StringIO

import pytest
from django.core.management import call_command

from catalog import models


@pytest.mark.django_db
class TestSeedLessons:
    """Tests for manage.py seed_lessons."""

    def test_seeds_empty_catalog(self):
        """Given an empty catalog, seeds ten lessons."""
        out = StringIO()

        call_command("seed_lessons", stdout=out)

        assert models.Lesson.objects.count() == 10
        assert models.Lesson.objects.filter(subject="Mathematics", location="Hendon", price=100, space=5).exists()
        assert "Seeded 10 lessons" in out.getvalue()

    def test_skips_non_empty_catalog(self):
        """Given existing lessons, seeds nothing."""
        call_command("seed_lessons", stdout=StringIO())
        out = StringIO()

        call_command("seed_lessons", stdout=out)

        assert models.Lesson.objects.count() == 10
        assert "nothing to do" in out.getvalue()

    def test_force_seeds_again(self):
        """Given --force, seeds even a non-empty catalog."""
        call_command("seed_lessons", stdout=StringIO())

        call_command("seed_lessons", "--force", stdout=StringIO())

        assert models.Lesson.objects.count() == 20
