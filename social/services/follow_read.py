"""Read-only helpers for follower/following and activity-log queries."""

from social.repos import ActivityRepo, FollowRepo


class FollowReadService:
    """Provide query helpers for follow relationships."""

    def __init__(self, follows=None, activities=None):
        self.follows = follows or FollowRepo()
        self.activities = activities or ActivityRepo()

    def following_ids(self, user_id):
        """Return ids of users that user_id follows."""
        return self.follows.followee_ids(follower_id=user_id)

    def follower_ids(self, user_id):
        """Return ids of users following user_id."""
        return self.follows.follower_ids(followee_id=user_id)

    def activities_for(self, user_id):
        """Return user_id's own activity log, newest first."""
        return self.activities.for_user(user_id=user_id)
