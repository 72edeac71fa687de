"""
Django admin configuration for notification models.

Notifications are written by other subsystems; the admin is for
inspecting what was inserted when a push went missing.
"""

from django.contrib import admin

from notifications.models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    """Admin configuration for Notification."""

    list_display = ["id", "user", "type", "actor", "target_type", "is_read", "created_at"]
    list_filter = ["type", "is_read"]
    search_fields = ["user__email", "actor__email", "target_id"]
    raw_id_fields = ["user", "actor"]
    readonly_fields = ["created_at", "updated_at"]
    date_hierarchy = "created_at"
