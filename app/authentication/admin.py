"""
Django admin configuration for authentication models.

Registers User and Profile so operators can inspect push tokens and
notification preference flags when diagnosing missing pushes.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from authentication.models import Profile, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for the email-based User model."""

    list_display = ("email", "is_active", "is_staff", "date_joined")
    list_filter = ("is_active", "is_staff", "is_superuser")
    search_fields = ("email",)
    ordering = ("-date_joined",)
    readonly_fields = ("date_joined", "last_login")

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Status", {"fields": ("is_active", "is_staff", "is_superuser")}),
        ("Permissions", {"fields": ("groups", "user_permissions")}),
        ("Important dates", {"fields": ("date_joined", "last_login")}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "password1", "password2"),
            },
        ),
    )


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    """Admin configuration for Profile, grouped by notification settings."""

    list_display = ("user", "display_name", "username", "has_push_token")
    search_fields = ("user__email", "display_name", "username")
    readonly_fields = ("created_at", "updated_at")

    fieldsets = (
        (None, {"fields": ("user", "display_name", "username")}),
        ("Push", {"fields": ("push_token",)}),
        (
            "Notification preferences",
            {
                "fields": (
                    "notify_recipe_like",
                    "notify_recipe_comment",
                    "notify_comment_reply",
                    "notify_new_follower",
                    "notify_mention",
                    "notify_recipe_save",
                    "notify_order_update",
                    "notify_reservation_update",
                    "notify_direct_message",
                )
            },
        ),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )

    @admin.display(boolean=True, description="Push token")
    def has_push_token(self, obj):
        return obj.has_push_token
