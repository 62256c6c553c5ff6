"""
URL configuration for the insyd project.

The JSON API lives under /api/ and the Django admin under /admin/.
"""
from django.contrib import admin
from django.urls import path, register_converter

from social.views.api_views import (
    reset_storage,
    users,
    follow,
    unfollow,
    post_blog,
    post_comment,
    notifications_for_user,
    following_for_user,
    followers_for_user,
    activities_for_user,
)
from social.converters import UserIdConverter

register_converter(UserIdConverter, "user_id")

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/init/', reset_storage, name='reset_storage'),
    path('api/users/', users, name='users'),
    path('api/follow/', follow, name='follow'),
    path('api/unfollow/', unfollow, name='unfollow'),
    path('api/blog/', post_blog, name='post_blog'),
    path('api/comment/', post_comment, name='post_comment'),
    path('api/notifications/<user_id:user_id>/', notifications_for_user, name='notifications_for_user'),
    path('api/following/<user_id:user_id>/', following_for_user, name='following_for_user'),
    path('api/followers/<user_id:user_id>/', followers_for_user, name='followers_for_user'),
    path('api/activities/<user_id:user_id>/', activities_for_user, name='activities_for_user'),
]
