"""Repository helpers for follow edges."""

from typing import List
from social.db_accessor import DB_Accessor
from social.models.follow import Follow


class FollowRepo(DB_Accessor):
    """Repository wrapper for follower→followee edges."""
    def __init__(self) -> None:
        """Initialise with the Follow model."""
        super().__init__(Follow)

    def is_following(self, *, follower_id: int, followee_id: int) -> bool:
        """Return True if follower_id follows followee_id."""
        return self.exists(follower_id=follower_id, followee_id=followee_id)

    def follow(self, *, follower_id: int, followee_id: int) -> Follow:
        """Create a follow edge."""
        return self.create(follower_id=follower_id, followee_id=followee_id)

    def unfollow(self, *, follower_id: int, followee_id: int) -> int:
        """Remove a follow edge; return number of rows removed."""
        return self.delete(follower_id=follower_id, followee_id=followee_id)

    def followee_ids(self, *, follower_id: int) -> List[int]:
        """Ids of users that follower_id follows, in the order the edges were created."""
        return list(
            self.list(filters={"follower_id": follower_id}, order_by=("id",)).values_list("followee_id", flat=True)
        )

    def follower_ids(self, *, followee_id: int) -> List[int]:
        """Ids of users following followee_id, in the order the edges were created."""
        return list(
            self.list(filters={"followee_id": followee_id}, order_by=("id",)).values_list("follower_id", flat=True)
        )
