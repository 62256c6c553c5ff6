from django.contrib import admin
from social.models import Activity, Follow, Notification, User


class ReadOnlyAdmin(admin.ModelAdmin):
    """Inspection-only admin; rows are written through the API services."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(User)
class UserAdmin(ReadOnlyAdmin):
    """Admin listing for users with follower/following counts."""
    list_display = ('id', 'name', 'follower_count', 'following_count')
    search_fields = ('name',)

    def follower_count(self, obj):
        """Number of users following this user."""
        return obj.followers.count()
    follower_count.short_description = "Followers"

    def following_count(self, obj):
        """Number of users this user follows."""
        return obj.following.count()
    following_count.short_description = "Following"


@admin.register(Follow)
class FollowAdmin(ReadOnlyAdmin):
    list_display = ('follower', 'followee', 'created_at')
    list_select_related = ('follower', 'followee')


@admin.register(Activity)
class ActivityAdmin(ReadOnlyAdmin):
    list_display = ('user', 'activity_type', 'short_content', 'created_at')
    list_filter = ('activity_type', 'created_at')
    search_fields = ('content', 'user__name')

    def short_content(self, obj):
        """Shorten activity text for list display."""
        return obj.content[:50] + "..." if len(obj.content) > 50 else obj.content


@admin.register(Notification)
class NotificationAdmin(ReadOnlyAdmin):
    list_display = ('user', 'content', 'activity', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('content', 'user__name')
