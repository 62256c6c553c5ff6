from .user import User
from .follow import Follow
from .activity import Activity
from .notification import Notification

__all__ = [
    "User",
    "Follow",
    "Activity",
    "Notification",
]
