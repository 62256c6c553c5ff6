"""Blog and comment posting with fan-out to every follower of the poster."""

import logging
from dataclasses import dataclass

from django.db import transaction

from social.exceptions import UnknownUserError
from social.models import Activity
from social.repos import ActivityRepo, FollowRepo, NotificationRepo, UserRepo

logger = logging.getLogger(__name__)


@dataclass
class PostResult:
    activity: Activity
    notified: int


class PostService:
    """Record a post as an Activity and notify the poster's followers."""

    MESSAGES = {
        Activity.BLOG: "{name} posted a new blog: {content}",
        Activity.COMMENT: "{name} commented: {content}",
    }

    def __init__(self, users=None, follows=None, activities=None, notifications=None):
        self.users = users or UserRepo()
        self.follows = follows or FollowRepo()
        self.activities = activities or ActivityRepo()
        self.notifications = notifications or NotificationRepo()

    def post_blog(self, user_id, content):
        """Publish a blog post for user_id."""
        return self._post(user_id, Activity.BLOG, content)

    def post_comment(self, user_id, content):
        """Publish a comment for user_id."""
        return self._post(user_id, Activity.COMMENT, content)

    @transaction.atomic
    def _post(self, user_id, activity_type, content):
        user = self.users.find_by_id(user_id)
        if user is None:
            raise UnknownUserError(user_id)

        activity = self.activities.record(user_id=user.id, activity_type=activity_type, content=content)
        follower_ids = self.follows.follower_ids(followee_id=user.id)
        message = self.MESSAGES[activity_type].format(name=user.name, content=content)
        created = self.notifications.fan_out(recipient_ids=follower_ids, activity=activity, content=message)

        logger.info("User %s posted a %s; notified %d follower(s)", user.id, activity_type, len(created))
        return PostResult(activity=activity, notified=len(created))
