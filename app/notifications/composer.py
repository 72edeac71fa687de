"""
Push message composition.

Pure functions that turn event facts into push title/body text. Nothing
here touches the database or the network.

Modes:
    compose_actor_event: "{actor} liked your recipe" style notifications
    compose_message: Direct message previews titled with the sender name
    compose_digest: "3 new notifications and 1 new post from people you follow"

Usage:
    from notifications.composer import compose_actor_event, kind_spec

    content = compose_actor_event("like", actor_name="Ana", title="KitchenSync")
    # PushContent(title="KitchenSync", body="Ana liked your recipe", channel="social")
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from notifications.models import NotificationKind


DEFAULT_ACTOR_NAME = "Someone"
PREVIEW_MAX_LENGTH = 100
PREVIEW_ELLIPSIS = "..."


@dataclass(frozen=True)
class KindSpec:
    """
    Static description of a notification kind.

    Attributes:
        label: Phrase following the actor name
        preference_field: Profile column gating this kind (None: ungated)
        channel: Client-side delivery channel
    """

    label: str
    preference_field: str | None
    channel: str


@dataclass(frozen=True)
class PushContent:
    """Composed push text plus the channel it belongs to."""

    title: str
    body: str
    channel: str


NOTIFICATION_KINDS: Mapping[str, KindSpec] = MappingProxyType(
    {
        NotificationKind.LIKE.value: KindSpec(
            "liked your recipe", "notify_recipe_like", "social"
        ),
        NotificationKind.COMMENT.value: KindSpec(
            "commented on your recipe", "notify_recipe_comment", "social"
        ),
        NotificationKind.REPLY.value: KindSpec(
            "replied to your comment", "notify_comment_reply", "social"
        ),
        NotificationKind.FOLLOW.value: KindSpec(
            "started following you", "notify_new_follower", "social"
        ),
        NotificationKind.MENTION.value: KindSpec(
            "mentioned you", "notify_mention", "social"
        ),
        NotificationKind.SAVE.value: KindSpec(
            "saved your recipe", "notify_recipe_save", "social"
        ),
        NotificationKind.ORDER_UPDATE.value: KindSpec(
            "updated your order", "notify_order_update", "orders"
        ),
        NotificationKind.RESERVATION_UPDATE.value: KindSpec(
            "updated your reservation", "notify_reservation_update", "reservations"
        ),
        NotificationKind.MESSAGE.value: KindSpec(
            "sent you a message", "notify_direct_message", "messages"
        ),
    }
)

FALLBACK_KIND = KindSpec("sent you a notification", None, "social")


def kind_spec(kind: str | None) -> KindSpec:
    """Return the spec for a notification kind, or the fallback for unknown kinds."""
    if not kind:
        return FALLBACK_KIND
    return NOTIFICATION_KINDS.get(str(kind), FALLBACK_KIND)


# =============================================================================
# Actor events
# =============================================================================


def compose_actor_event(
    kind: str | None,
    actor_name: str | None,
    title: str,
) -> PushContent:
    """
    Compose a push for a notification triggered by another user.

    Args:
        kind: Notification type
        actor_name: Display name of the actor (None when unresolved)
        title: Push title (the application name)
    """
    spec = kind_spec(kind)
    return PushContent(
        title=title,
        body=f"{actor_name or DEFAULT_ACTOR_NAME} {spec.label}",
        channel=spec.channel,
    )


# =============================================================================
# Messages
# =============================================================================


def truncate_preview(text: str) -> str:
    """Cap text at PREVIEW_MAX_LENGTH characters, marking cuts with an ellipsis."""
    if len(text) <= PREVIEW_MAX_LENGTH:
        return text
    return text[: PREVIEW_MAX_LENGTH - len(PREVIEW_ELLIPSIS)] + PREVIEW_ELLIPSIS


def compose_message_preview(content: str | None, message_type: str | None) -> str:
    """
    Build the preview line for a chat message.

    Text messages preview their content; images read "Sent a photo";
    other attachment types read "Shared {type}" with underscores as spaces.
    """
    message_type = message_type or "text"

    if message_type == "text":
        preview = content or ""
    elif message_type == "image":
        preview = "Sent a photo"
    else:
        preview = f"Shared {message_type.replace('_', ' ')}"

    return truncate_preview(preview)


def compose_message(
    sender_name: str | None,
    content: str | None,
    message_type: str | None,
) -> PushContent:
    """Compose a direct message push titled with the sender's name."""
    return PushContent(
        title=sender_name or DEFAULT_ACTOR_NAME,
        body=compose_message_preview(content, message_type),
        channel=kind_spec(NotificationKind.MESSAGE).channel,
    )


# =============================================================================
# Digest
# =============================================================================


def _pluralize(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def _join_phrases(phrases: list[str]) -> str:
    if len(phrases) <= 1:
        return "".join(phrases)
    return ", ".join(phrases[:-1]) + " and " + phrases[-1]


def compose_digest(unread_count: int, new_post_count: int) -> str:
    """
    Build the digest body from window counts.

    Zero counts are omitted; unread notifications come first.
    """
    phrases = []
    if unread_count:
        phrases.append(
            _pluralize(unread_count, "new notification", "new notifications")
        )
    if new_post_count:
        phrases.append(
            _pluralize(new_post_count, "new post", "new posts")
            + " from people you follow"
        )
    return _join_phrases(phrases)
