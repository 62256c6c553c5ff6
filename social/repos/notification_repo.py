"""Repository helpers for notifications."""

from typing import Iterable, List
from social.db_accessor import DB_Accessor
from social.models.activity import Activity
from social.models.notification import Notification


class NotificationRepo(DB_Accessor):
    """Append-only access to Notification rows."""
    def __init__(self) -> None:
        super().__init__(Notification)

    def notify(self, *, user_id: int, activity: Activity, content: str) -> Notification:
        """Create one notification for user_id about activity."""
        return self.create(user_id=user_id, activity=activity, content=content)

    def fan_out(self, *, recipient_ids: Iterable[int], activity: Activity, content: str) -> List[Notification]:
        """Create one notification per recipient, all pointing at the same activity."""
        rows = [Notification(user_id=rid, activity=activity, content=content) for rid in recipient_ids]
        if not rows:
            return []
        return self.bulk_create(rows)

    def for_user(self, *, user_id: int) -> List[Notification]:
        """Notifications received by user_id, newest first."""
        return list(self.list(filters={"user_id": user_id}, order_by=("-created_at", "-id")))
