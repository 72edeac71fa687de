"""
Django admin configuration for chat models.

Provides admin interfaces for:
- Conversation inspection with participants inline
- Participant mute state (the first thing to check for a missing push)
- Message lookup
"""

from django.contrib import admin

from chat.models import Conversation, Message, Participant


class ParticipantInline(admin.TabularInline):
    """Inline display of participants in conversation admin."""

    model = Participant
    extra = 0
    fields = ["user", "is_muted", "left_at", "created_at"]
    readonly_fields = ["created_at"]
    raw_id_fields = ["user"]


@admin.register(Conversation)
class ConversationAdmin(admin.ModelAdmin):
    """Admin interface for Conversation model."""

    list_display = ["id", "conversation_type", "title", "created_at"]
    list_filter = ["conversation_type", "created_at"]
    search_fields = ["title", "id"]
    readonly_fields = ["created_at", "updated_at"]
    raw_id_fields = ["created_by"]
    inlines = [ParticipantInline]


@admin.register(Participant)
class ParticipantAdmin(admin.ModelAdmin):
    """Admin interface for Participant model."""

    list_display = ["conversation", "user", "is_muted", "left_at"]
    list_filter = ["is_muted"]
    search_fields = ["user__email", "conversation__title"]
    raw_id_fields = ["conversation", "user"]


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    """Admin interface for Message model."""

    list_display = ["id", "conversation", "sender", "message_type", "created_at"]
    list_filter = ["message_type"]
    search_fields = ["content", "sender__email"]
    raw_id_fields = ["conversation", "sender"]
    readonly_fields = ["created_at", "updated_at"]
