from .user_repo import UserRepo
from .follow_repo import FollowRepo
from .activity_repo import ActivityRepo
from .notification_repo import NotificationRepo

__all__ = ["UserRepo", "FollowRepo", "ActivityRepo", "NotificationRepo"]
