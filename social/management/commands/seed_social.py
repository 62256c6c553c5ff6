"""Management command to reset social storage and seed the starter users."""

from faker import Faker
from django.conf import settings
from django.core.management.base import BaseCommand

from social.services import UserService


class Command(BaseCommand):
    """Wipe users, follows, activities and notifications, then insert starter users."""
    help = 'Resets social data and seeds the starter users'

    def add_arguments(self, parser):
        """Add optional flags for extra sample users."""
        parser.add_argument(
            "--extra-users",
            type=int,
            default=0,
            help="Number of additional Faker-generated users to create after the starter set.",
        )
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Seed for Faker so generated names are reproducible.",
        )

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating extra user names."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the reset and seeding sequence."""
        if options.get("seed") is not None:
            self.faker.seed_instance(options["seed"])
        names = list(settings.SOCIAL_SEED_USERS)
        names.extend(self.generate_names(max(0, options.get("extra_users") or 0)))
        users = UserService().reset_and_seed(names, force=True)
        for user in users:
            self.stdout.write(f"  {user.id}: {user.name}")
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(users)} users"))

    def generate_names(self, count):
        """Return `count` random first names."""
        return [self.faker.first_name() for _ in range(count)]
