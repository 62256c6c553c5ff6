from django.core.management.base import BaseCommand
from social.services import UserService

class Command(BaseCommand):
    """
    Management command to remove all social data from the database.

    Deletes every notification, activity, follow edge and user, leaving the
    schema in place. Complements `seed_social`.
    """

    help = 'Removes all users, follows, activities and notifications'

    def handle(self, *args, **options):
        """Delete all social rows and report the counts."""
        counts = UserService().wipe()
        summary = ", ".join(f"{count} {name}" for name, count in counts.items())
        self.stdout.write(self.style.SUCCESS(f"Deleted {summary}."))
