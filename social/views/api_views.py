"""JSON API for the social graph. Views only parse input and call services."""

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from social.serializers import (
    ActivitySerializer,
    FollowRequestSerializer,
    NotificationSerializer,
    PostRequestSerializer,
    UserSerializer,
)
from social.services import (
    FollowReadService,
    FollowService,
    NotificationService,
    PostService,
    UserService,
)

__all__ = [
    "reset_storage",
    "users",
    "follow",
    "unfollow",
    "post_blog",
    "post_comment",
    "notifications_for_user",
    "following_for_user",
    "followers_for_user",
    "activities_for_user",
]

user_service = UserService()
follow_service = FollowService()
post_service = PostService()
notification_service = NotificationService()
follow_read_service = FollowReadService()


def _validated(serializer_class, request):
    serializer = serializer_class(data=request.data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


@api_view(['POST'])
def reset_storage(request):
    """Wipe all social data and reseed the starter users."""
    seeded = user_service.reset_and_seed()
    return Response(UserSerializer(seeded, many=True).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'POST'])
def users(request):
    """GET lists every user; POST creates one from `{name}`."""
    if request.method == 'POST':
        data = _validated(UserSerializer, request)
        user = user_service.create_user(data["name"])
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)
    return Response(UserSerializer(user_service.list_users(), many=True).data)


@api_view(['POST'])
def follow(request):
    data = _validated(FollowRequestSerializer, request)
    follow_service.follow(data["followerId"], data["followeeId"])
    return Response({"success": True})


@api_view(['POST'])
def unfollow(request):
    data = _validated(FollowRequestSerializer, request)
    follow_service.unfollow(data["followerId"], data["followeeId"])
    return Response({"success": True})


@api_view(['POST'])
def post_blog(request):
    data = _validated(PostRequestSerializer, request)
    result = post_service.post_blog(data["userId"], data["content"])
    return Response({"success": True, "notified": result.notified})


@api_view(['POST'])
def post_comment(request):
    data = _validated(PostRequestSerializer, request)
    result = post_service.post_comment(data["userId"], data["content"])
    return Response({"success": True, "notified": result.notified})


@api_view(['GET'])
def notifications_for_user(request, user_id):
    """Notifications received by the user, newest first."""
    notifs = notification_service.for_user(user_id)
    return Response(NotificationSerializer(notifs, many=True).data)


@api_view(['GET'])
def following_for_user(request, user_id):
    """Ids of the users this user follows."""
    return Response(follow_read_service.following_ids(user_id))


@api_view(['GET'])
def followers_for_user(request, user_id):
    """Ids of the users following this user."""
    return Response(follow_read_service.follower_ids(user_id))


@api_view(['GET'])
def activities_for_user(request, user_id):
    """The user's own activity log, newest first."""
    return Response(ActivitySerializer(follow_read_service.activities_for(user_id), many=True).data)
