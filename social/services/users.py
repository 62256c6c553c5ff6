"""Service helpers for listing, creating and reseeding users."""

import logging

from django.conf import settings
from django.db import transaction

from social.exceptions import ResetDisabledError, ValidationError
from social.repos import ActivityRepo, FollowRepo, NotificationRepo, UserRepo

logger = logging.getLogger(__name__)


class UserService:
    """Encapsulate user listing plus the administrative storage reset."""

    def __init__(self, users=None, follows=None, activities=None, notifications=None):
        self.users = users or UserRepo()
        self.follows = follows or FollowRepo()
        self.activities = activities or ActivityRepo()
        self.notifications = notifications or NotificationRepo()

    def list_users(self):
        """Return all users ordered by id."""
        return self.users.list_all()

    def create_user(self, name):
        """Create a user; the name must contain something other than whitespace."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("User name must not be blank")
        user = self.users.create_user(name)
        logger.info("Created user %s (%s)", user.id, user.name)
        return user

    @transaction.atomic
    def wipe(self):
        """Delete every notification, activity, follow edge and user; id numbering restarts at 1."""
        counts = {
            "notifications": self.notifications.delete_all(),
            "activities": self.activities.delete_all(),
            "follows": self.follows.delete_all(),
            "users": self.users.delete_all(),
        }
        for repo in (self.notifications, self.activities, self.follows, self.users):
            repo.reset_ids()
        logger.info("Wiped social storage: %s", counts)
        return counts

    @transaction.atomic
    def reset_and_seed(self, names=None, *, force=False):
        """
        Wipe storage and insert the starter users.

        Refuses unless SOCIAL_ALLOW_RESET is on or `force` is passed
        (management commands pass force, the HTTP endpoint does not).
        """
        if not (force or settings.SOCIAL_ALLOW_RESET):
            raise ResetDisabledError()
        self.wipe()
        names = list(names if names is not None else settings.SOCIAL_SEED_USERS)
        seeded = self.users.create_many(names)
        logger.info("Seeded %d user(s): %s", len(seeded), ", ".join(u.name for u in seeded))
        return seeded
