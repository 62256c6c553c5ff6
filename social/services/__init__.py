from .follow import FollowService
from .follow_read import FollowReadService
from .notifications import NotificationService
from .posts import PostResult, PostService
from .users import UserService

__all__ = [
    "FollowService",
    "FollowReadService",
    "NotificationService",
    "PostResult",
    "PostService",
    "UserService",
]
