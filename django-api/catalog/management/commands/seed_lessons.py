from django.core.management.base import BaseCommand

from catalog.domain.defaults import DEFAULT_LESSONS
from catalog.stores.django_store import DjangoLessonStore


class Command(BaseCommand):
    help = "Insert the default lesson catalog when the database has no lessons"

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Seed even if lessons already exist",
        )

    def handle(self, *args, **options):
        store = DjangoLessonStore()

        existing = len(store.list_lessons())
        if existing and not options["force"]:
            self.stdout.write(f"Catalog already has {existing} lessons, nothing to do")
            return

        for draft in DEFAULT_LESSONS:
            lesson = store.add_lesson(draft)
            self.stdout.write(f"Added {lesson.subject} at {lesson.location} ({lesson.id})")

        self.stdout.write(
            self.style.SUCCESS(f"Seeded {len(DEFAULT_LESSONS)} lessons")
        )
