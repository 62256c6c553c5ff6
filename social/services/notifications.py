"""Service helpers for fetching notifications."""

from social.repos import NotificationRepo


class NotificationService:
    """Encapsulate notification querying."""

    def __init__(self, notifications=None):
        self.notifications = notifications or NotificationRepo()

    def for_user(self, user_id):
        """Return every notification received by user_id, newest first."""
        return self.notifications.for_user(user_id=user_id)
