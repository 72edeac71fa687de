"""
Django admin configuration for user posts and follows.
"""

from django.contrib import admin

from user_posts.models import UserFollow, UserPost


@admin.register(UserPost)
class UserPostAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "visibility", "created_at"]
    list_filter = ["visibility"]
    search_fields = ["caption", "user__email"]
    raw_id_fields = ["user"]


@admin.register(UserFollow)
class UserFollowAdmin(admin.ModelAdmin):
    list_display = ["follower", "following", "created_at"]
    search_fields = ["follower__email", "following__email"]
    raw_id_fields = ["follower", "following"]
