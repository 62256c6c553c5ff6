from rest_framework import serializers
from social.models import Activity, Notification, User


class UserSerializer(serializers.ModelSerializer):
    """Serializer for users; also validates the create-user body."""

    class Meta:
        model = User
        fields = ["id", "name"]
        read_only_fields = ["id"]


class FollowRequestSerializer(serializers.Serializer):
    """Body of /follow and /unfollow."""
    followerId = serializers.IntegerField(min_value=1)
    followeeId = serializers.IntegerField(min_value=1)


class PostRequestSerializer(serializers.Serializer):
    """Body of /blog and /comment. Empty content is accepted."""
    userId = serializers.IntegerField(min_value=1)
    content = serializers.CharField(allow_blank=True, trim_whitespace=False)


class ActivitySerializer(serializers.ModelSerializer):
    """Serializer for Activity rows using the client's camelCase keys."""
    userId = serializers.IntegerField(source="user_id", read_only=True)
    type = serializers.CharField(source="activity_type", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Activity
        fields = ["id", "userId", "type", "content", "createdAt"]


class NotificationSerializer(serializers.ModelSerializer):
    """Serializer for Notification rows using the client's camelCase keys."""
    userId = serializers.IntegerField(source="user_id", read_only=True)
    activityId = serializers.IntegerField(source="activity_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Notification
        fields = ["id", "userId", "activityId", "content", "createdAt"]
