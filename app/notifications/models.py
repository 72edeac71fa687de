"""
Notification system models.

This module defines:
- NotificationKind: Declared set of notification event types
- SkipReason: Reason codes for events that correctly produce no push
- Notification: In-app notification rows written by other subsystems

Design Decisions:
    - The notifications app never writes Notification rows itself; inserts
      come from the subsystems that own the triggering action (likes,
      follows, orders, ...) and reach the push pipeline via webhook
    - type is stored as a free string; NotificationKind is the declared set
      the composer has phrases for, and unknown values fall back to a
      generic phrase instead of being rejected
    - actor uses SET_NULL so notifications survive actor deletion
"""

from __future__ import annotations

from django.conf import settings
from django.db import models

from core.models import BaseModel


# =============================================================================
# Enums
# =============================================================================


class NotificationKind(models.TextChoices):
    """
    Declared notification event types.

    Each kind has a label phrase, an optional Profile preference column
    and a delivery channel in notifications.composer.NOTIFICATION_KINDS.
    """

    LIKE = "like", "Recipe liked"
    COMMENT = "comment", "Recipe commented"
    REPLY = "reply", "Comment replied"
    FOLLOW = "follow", "New follower"
    MENTION = "mention", "Mentioned"
    SAVE = "save", "Recipe saved"
    ORDER_UPDATE = "order_update", "Order updated"
    RESERVATION_UPDATE = "reservation_update", "Reservation updated"
    MESSAGE = "message", "Direct message"


class SkipReason(models.TextChoices):
    """
    Standardized reasons for events that are acknowledged without a push.

    Returned to the webhook source with HTTP 200 so that a correct
    decision not to notify never triggers an upstream retry.
    """

    # Validation skips
    NO_USER_ID = "no user_id", "Notification record has no user_id"
    MISSING_FIELDS = "missing fields", "Message record lacks conversation or sender"
    INVALID_RECORD = "invalid_record", "Record could not be parsed"

    # Recipient skips
    NO_PUSH_TOKEN = "no_push_token", "Recipient has no push token"
    USER_PREFERENCE_DISABLED = "user_preference_disabled", "Recipient disabled this type"
    NO_RECIPIENTS = "no_recipients", "No other participants"
    ALL_MUTED = "all_muted", "All participants muted the conversation"
    NO_PUSH_TOKENS = "no_push_tokens", "No participant has a push token"
    ALL_DM_DISABLED = "all_dm_disabled", "All participants disabled direct messages"
    ALL_PREFERENCE_DISABLED = "all_preference_disabled", "All recipients disabled this type"


# =============================================================================
# Models
# =============================================================================


class Notification(BaseModel):
    """
    An in-app notification for a user.

    Inserting a row fires the notification-created webhook, which pushes
    the notification to the recipient's device. The digest counts unread
    rows over a trailing window.

    Fields:
        user: Recipient of the notification
        type: Event type (see NotificationKind; open set)
        actor: User who triggered the notification (optional)
        target_id: Identifier of the object acted on (recipe, order, ...)
        target_type: Kind of object target_id refers to
        is_read: Whether the recipient has seen it
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
        help_text="User receiving this notification",
    )

    type = models.CharField(
        max_length=50,
        db_index=True,
        help_text="Notification event type (e.g., 'like', 'follow')",
    )

    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="triggered_notifications",
        help_text="User who triggered this notification",
    )

    target_id = models.CharField(
        max_length=64,
        blank=True,
        default="",
        help_text="Identifier of the object acted on",
    )

    target_type = models.CharField(
        max_length=50,
        blank=True,
        default="",
        help_text="Kind of object target_id refers to (e.g., 'recipe')",
    )

    is_read = models.BooleanField(
        default=False,
        help_text="Whether the recipient has read this notification",
    )

    class Meta:
        db_table = "notifications_notification"
        ordering = ["-created_at"]
        indexes = [
            # Unread counts (badge and digest)
            models.Index(
                fields=["user", "is_read", "created_at"],
                name="notif_user_unread_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        return f"Notification {self.pk} ({self.type}) for {self.user_id}"
