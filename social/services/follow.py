"""Follow / unfollow operations and the single notification each one sends."""

import logging

from django.db import IntegrityError, transaction

from social.exceptions import (
    DuplicateEdgeError,
    EdgeNotFoundError,
    SelfReferenceError,
    UnknownUserError,
)
from social.models import Activity
from social.repos import ActivityRepo, FollowRepo, NotificationRepo, UserRepo

logger = logging.getLogger(__name__)


class FollowService:
    """Maintain follow edges; every successful call logs one Activity and one Notification."""

    def __init__(self, users=None, follows=None, activities=None, notifications=None):
        self.users = users or UserRepo()
        self.follows = follows or FollowRepo()
        self.activities = activities or ActivityRepo()
        self.notifications = notifications or NotificationRepo()

    def _resolve_pair(self, follower_id, followee_id, action):
        if follower_id == followee_id:
            raise SelfReferenceError(action)
        follower = self.users.find_by_id(follower_id)
        if follower is None:
            raise UnknownUserError(follower_id)
        if not self.users.exists(id=followee_id):
            raise UnknownUserError(followee_id)
        return follower

    @transaction.atomic
    def follow(self, follower_id, followee_id):
        follower = self._resolve_pair(follower_id, followee_id, "follow")

        if self.follows.is_following(follower_id=follower_id, followee_id=followee_id):
            raise DuplicateEdgeError(follower_id, followee_id)

        # A concurrent follow can land between the check and the insert; the
        # unique constraint catches it and the savepoint keeps the outer block usable.
        try:
            with transaction.atomic():
                self.follows.follow(follower_id=follower_id, followee_id=followee_id)
        except IntegrityError as exc:
            raise DuplicateEdgeError(follower_id, followee_id) from exc

        activity = self.activities.record(
            user_id=follower_id,
            activity_type=Activity.FOLLOW,
            content=f"{follower.name} followed User {followee_id}",
        )
        self.notifications.notify(
            user_id=followee_id,
            activity=activity,
            content=f"You have a new follower: {follower.name}!",
        )
        logger.info("User %s followed user %s", follower_id, followee_id)
        return activity

    @transaction.atomic
    def unfollow(self, follower_id, followee_id):
        follower = self._resolve_pair(follower_id, followee_id, "unfollow")

        if not self.follows.unfollow(follower_id=follower_id, followee_id=followee_id):
            raise EdgeNotFoundError(follower_id, followee_id)

        activity = self.activities.record(
            user_id=follower_id,
            activity_type=Activity.UNFOLLOW,
            content=f"{follower.name} unfollowed User {followee_id}",
        )
        self.notifications.notify(
            user_id=followee_id,
            activity=activity,
            content=f"{follower.name} unfollowed you",
        )
        logger.info("User %s unfollowed user %s", follower_id, followee_id)
        return activity
