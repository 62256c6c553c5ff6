"""Repository helpers for the activity log."""

from typing import List
from social.db_accessor import DB_Accessor
from social.models.activity import Activity


class ActivityRepo(DB_Accessor):
    """Append-only access to Activity rows."""
    def __init__(self) -> None:
        super().__init__(Activity)

    def record(self, *, user_id: int, activity_type: str, content: str) -> Activity:
        """Append an activity for user_id."""
        return self.create(user_id=user_id, activity_type=activity_type, content=content)

    def for_user(self, *, user_id: int) -> List[Activity]:
        """Activities performed by user_id, newest first."""
        return list(self.list(filters={"user_id": user_id}, order_by=("-created_at", "-id")))
