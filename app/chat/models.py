"""
Chat system models.

This module defines the chat rows the message push pipeline reads:
- Direct (1:1) and group conversations
- Participants with per-conversation mute state
- Messages of several content types

Models:
    Conversation: Container for messages between participants
    Participant: User participation in a conversation with mute tracking
    Message: Individual message within a conversation

Design Decisions:
    - Participant records are kept after a user leaves (left_at is set);
      only active participants (left_at IS NULL) receive pushes
    - is_muted silences pushes for one conversation without touching the
      user's global direct-message preference
    - message_type is an open set; the composer falls back to a generic
      "Shared ..." preview for types it has no phrase for
"""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import Q

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel


class ConversationType(models.TextChoices):
    """
    Type of conversation.

    DIRECT: Exactly two participants
    GROUP: Two or more participants
    """

    DIRECT = "direct", "Direct Message"
    GROUP = "group", "Group"


class MessageType(models.TextChoices):
    """
    Type of message content.

    TEXT: User-authored text message (content is the text)
    IMAGE: Photo attachment (content is the image URL)
    RECIPE: Shared recipe card (content is the recipe id)
    MENU_ITEM: Shared menu item (content is the menu item id)
    """

    TEXT = "text", "Text"
    IMAGE = "image", "Image"
    RECIPE = "recipe", "Recipe"
    MENU_ITEM = "menu_item", "Menu Item"


class Conversation(UUIDPrimaryKeyMixin, BaseModel):
    """
    A conversation between two or more users.

    Fields:
        conversation_type: Direct or group
        title: Group title (blank for direct conversations)
        created_by: User who started the conversation
    """

    conversation_type = models.CharField(
        max_length=10,
        choices=ConversationType.choices,
        default=ConversationType.DIRECT,
        help_text="Direct or group conversation",
    )
    title = models.CharField(
        max_length=100,
        blank=True,
        help_text="Group title (blank for direct conversations)",
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_conversations",
        help_text="User who started the conversation",
    )

    class Meta:
        db_table = "chat_conversation"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        """Return human-readable representation."""
        return self.title or f"Conversation {self.pk}"


class Participant(BaseModel):
    """
    Tracks user participation in conversations.

    Fields:
        conversation: Conversation this participation belongs to
        user: User participating in the conversation
        is_muted: True if the user silenced pushes for this conversation
        left_at: When the user left (NULL if still active)

    Constraints:
        - One active participation per user per conversation
    """

    conversation = models.ForeignKey(
        Conversation,
        on_delete=models.CASCADE,
        related_name="participants",
        help_text="Conversation this participation belongs to",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="conversation_participations",
        help_text="User participating in the conversation",
    )
    is_muted = models.BooleanField(
        default=False,
        help_text="Whether the user muted pushes for this conversation",
    )
    left_at = models.DateTimeField(
        null=True,
        blank=True,
        db_index=True,
        help_text="When the user left (null if still active)",
    )

    class Meta:
        db_table = "chat_participant"
        ordering = ["created_at"]
        indexes = [
            models.Index(
                fields=["conversation", "left_at"],
                name="chat_part_conv_active_idx",
            ),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["conversation", "user"],
                condition=Q(left_at__isnull=True),
                name="unique_active_participation",
            ),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        muted = " [muted]" if self.is_muted else ""
        return f"Participant: {self.user_id} in {self.conversation_id}{muted}"

    @property
    def is_active(self) -> bool:
        """Check if this participation is currently active."""
        return self.left_at is None


class Message(UUIDPrimaryKeyMixin, BaseModel):
    """
    A message within a conversation.

    Inserting a row here is what fires the message-created webhook.

    Fields:
        conversation: Conversation this message belongs to
        sender: User who sent the message
        message_type: Content type (text, image, recipe, ...)
        content: Message text, or a reference for non-text types
    """

    conversation = models.ForeignKey(
        Conversation,
        on_delete=models.CASCADE,
        related_name="messages",
        help_text="Conversation this message belongs to",
    )
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sent_messages",
        help_text="User who sent this message",
    )
    message_type = models.CharField(
        max_length=30,
        default=MessageType.TEXT,
        help_text="Type of message content",
    )
    content = models.TextField(
        blank=True,
        help_text="Message text, or a reference for non-text messages",
    )

    class Meta:
        db_table = "chat_message"
        ordering = ["created_at"]
        indexes = [
            models.Index(
                fields=["conversation", "created_at"],
                name="chat_msg_conv_created_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        return f"Message {self.pk} ({self.message_type}) in {self.conversation_id}"
