"""
Data types for the push notification pipeline.

This module defines the dataclasses passed between the pipeline stages
and returned to the HTTP layer.

Types:
    NotificationEvent: Parsed notification-created webhook record
    MessageEvent: Parsed message-created webhook record
    Participation: A conversation participant candidate
    Recipient: A candidate for push delivery (token + preferences)
    DispatchResult: Outcome of one provider call ({sent, failed})
    Skipped: Terminal outcome for a correct decision not to push
    Dispatched: Terminal outcome wrapping a DispatchResult
    DigestOutcome: Outcome of a digest run

Usage:
    from notifications.types import Dispatched, DispatchResult, Skipped

    outcome = NotificationCreatedHandler.handle(event)
    if isinstance(outcome, Skipped):
        logger.info(f"Skipped: {outcome.reason}")
    return Response(outcome.to_response())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union
from uuid import UUID

if TYPE_CHECKING:
    from authentication.models import Profile


# Profile columns that hold per-type preference flags
PREFERENCE_FIELDS = (
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


# =============================================================================
# Inbound events
# =============================================================================


@dataclass(frozen=True)
class NotificationEvent:
    """
    A notification row as delivered by the notification-created webhook.

    Attributes:
        user_id: Recipient (required for a push)
        type: Event type; unknown values use the fallback phrase
        actor_id: User who triggered it, if any
        target_id: Object acted on, if any
        target_type: Kind of object target_id refers to
    """

    user_id: Optional[UUID]
    type: str = ""
    actor_id: Optional[UUID] = None
    target_id: Optional[str] = None
    target_type: Optional[str] = None


@dataclass(frozen=True)
class MessageEvent:
    """
    A message row as delivered by the message-created webhook.

    Attributes:
        conversation_id: Conversation the message was posted to
        sender_id: Author; excluded from the recipients
        content: Raw message content
        message_type: "text" or an attachment type
        message_id: Id of the inserted row, if sent
    """

    conversation_id: Optional[UUID]
    sender_id: Optional[UUID]
    content: str = ""
    message_type: str = "text"
    message_id: Optional[UUID] = None


# =============================================================================
# Recipients
# =============================================================================


@dataclass(frozen=True)
class Participation:
    """An active conversation participant other than the sender."""

    user_id: UUID
    is_muted: bool = False


@dataclass(frozen=True)
class Recipient:
    """
    A candidate for push delivery.

    Attributes:
        user_id: The user
        push_token: Device token (None or "" means unreachable)
        preferences: Preference column -> True / False / None (unset)
        is_muted: Conversation mute flag (conversation events only)
    """

    user_id: UUID
    push_token: Optional[str]
    preferences: Mapping[str, Optional[bool]] = field(default_factory=dict)
    is_muted: bool = False

    @classmethod
    def from_profile(cls, profile: Profile, is_muted: bool = False) -> Recipient:
        """Build a recipient from a Profile row."""
        return cls(
            user_id=profile.user_id,
            push_token=profile.push_token,
            preferences={name: getattr(profile, name) for name in PREFERENCE_FIELDS},
            is_muted=is_muted,
        )


# =============================================================================
# Outcomes
# =============================================================================


@dataclass(frozen=True)
class DispatchResult:
    """
    Outcome of a provider call.

    sent + failed equals the number of tokens attempted; both are zero
    when there were no tokens and no call was made.
    """

    sent: int = 0
    failed: int = 0

    @property
    def attempted(self) -> int:
        """Number of tokens included in the provider call."""
        return self.sent + self.failed

    def to_dict(self) -> dict[str, int]:
        return {"sent": self.sent, "failed": self.failed}


@dataclass(frozen=True)
class Skipped:
    """Terminal outcome: the pipeline correctly decided not to push."""

    reason: str

    def to_response(self) -> dict[str, Any]:
        return {"skipped": True, "reason": str(self.reason)}


@dataclass(frozen=True)
class Dispatched:
    """Terminal outcome: the provider was called (or there was nothing to send)."""

    result: DispatchResult

    def to_response(self) -> dict[str, Any]:
        return {"data": self.result.to_dict()}


HandlerOutcome = Union[Skipped, Dispatched]


@dataclass(frozen=True)
class DigestOutcome:
    """
    Outcome of a digest run for one user.

    Attributes:
        delivered: False when there was nothing to report
        reason: Why nothing was sent (e.g., "no_unread")
        result: Provider outcome when delivered
        unread_count: Unread notifications in the window
        new_post_count: New posts from followed accounts in the window
    """

    delivered: bool
    reason: Optional[str] = None
    result: Optional[DispatchResult] = None
    unread_count: int = 0
    new_post_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize for the API response.

        Delivered digests report the provider counts ({sent, failed});
        empty digests report {sent: False, reason}.
        """
        if not self.delivered or self.result is None:
            return {"sent": False, "reason": self.reason}
        return self.result.to_dict()
