"""
Webhook event handlers for the push pipeline.

Each handler turns one inserted row into at most one provider call:
Validate -> Resolve recipients -> Filter -> Compose -> Dispatch

Handlers are stateless and never write to the database. Every decision
not to push is returned as Skipped(reason) rather than raised, so the
webhook source sees HTTP 200 and does not retry.

Handlers:
    NotificationCreatedHandler: Push for a new in-app notification
    MessageCreatedHandler: Push for a new chat message

Usage:
    from notifications.handlers import NotificationCreatedHandler
    from notifications.types import NotificationEvent

    outcome = NotificationCreatedHandler.handle(
        NotificationEvent(user_id=user.id, type="like", actor_id=actor.id)
    )
"""

from __future__ import annotations

from django.conf import settings

from core.services import BaseService

from notifications.composer import compose_actor_event, compose_message
from notifications.models import NotificationKind, SkipReason
from notifications.preferences import PreferenceGate
from notifications.push import PushDispatcher
from notifications.recipients import RecipientStore
from notifications.types import (
    Dispatched,
    HandlerOutcome,
    MessageEvent,
    NotificationEvent,
    Recipient,
    Skipped,
)


class NotificationCreatedHandler(BaseService):
    """Pushes a newly inserted notification to its recipient's device."""

    @classmethod
    def handle(cls, event: NotificationEvent) -> HandlerOutcome:
        """
        Handle a notification-created event.

        Returns:
            Skipped with no user_id, no_push_token or
            user_preference_disabled, otherwise Dispatched
        """
        logger = cls.get_logger()

        if cls.validate_required(user_id=event.user_id):
            return Skipped(SkipReason.NO_USER_ID)

        profile = RecipientStore.resolve_profile(event.user_id)
        if profile is None or not profile.has_push_token:
            logger.info(f"User {event.user_id} has no push token, skipping {event.type}")
            return Skipped(SkipReason.NO_PUSH_TOKEN)

        recipient = Recipient.from_profile(profile)
        if not PreferenceGate.is_enabled(recipient, event.type):
            logger.info(f"User {event.user_id} disabled '{event.type}' notifications")
            return Skipped(SkipReason.USER_PREFERENCE_DISABLED)

        actor_name = RecipientStore.resolve_display_name(event.actor_id)
        unread_count = RecipientStore.count_unread(event.user_id)

        content = compose_actor_event(
            event.type,
            actor_name,
            title=settings.PUSH_APP_NAME,
        )
        data = {
            "type": event.type,
            "channel": content.channel,
            "actorId": str(event.actor_id) if event.actor_id else None,
            "targetId": event.target_id,
            "targetType": event.target_type,
            "badge": unread_count,
        }

        result = PushDispatcher.dispatch(
            [recipient.push_token], content.title, content.body, data
        )
        logger.info(
            f"Notification push for user {event.user_id} ({event.type}): "
            f"sent={result.sent} failed={result.failed}"
        )
        return Dispatched(result)


class MessageCreatedHandler(BaseService):
    """Pushes a new chat message to the other conversation participants."""

    @classmethod
    def handle(cls, event: MessageEvent) -> HandlerOutcome:
        """
        Handle a message-created event.

        Returns:
            Skipped with missing fields, no_recipients, all_muted,
            no_push_tokens or all_dm_disabled, otherwise Dispatched
        """
        logger = cls.get_logger()

        if cls.validate_required(
            conversation_id=event.conversation_id,
            sender_id=event.sender_id,
        ):
            return Skipped(SkipReason.MISSING_FIELDS)

        participants = RecipientStore.resolve_participants(
            event.conversation_id,
            exclude=event.sender_id,
        )
        if not participants:
            return Skipped(SkipReason.NO_RECIPIENTS)

        unmuted = PreferenceGate.drop_muted(participants)
        if not unmuted:
            return Skipped(SkipReason.ALL_MUTED)

        profiles = RecipientStore.resolve_profiles_with_tokens(
            [participant.user_id for participant in unmuted]
        )
        recipients = PreferenceGate.drop_tokenless(
            Recipient.from_profile(profile) for profile in profiles
        )
        if not recipients:
            return Skipped(SkipReason.NO_PUSH_TOKENS)

        recipients = PreferenceGate.drop_disabled(recipients, NotificationKind.MESSAGE)
        if not recipients:
            return Skipped(SkipReason.ALL_DM_DISABLED)

        sender_name = RecipientStore.resolve_display_name(event.sender_id)
        content = compose_message(sender_name, event.content, event.message_type)
        data = {
            "type": NotificationKind.MESSAGE.value,
            "conversationId": str(event.conversation_id),
            "senderId": str(event.sender_id),
            "channel": content.channel,
        }

        result = PushDispatcher.dispatch(
            [recipient.push_token for recipient in recipients],
            content.title,
            content.body,
            data,
        )
        logger.info(
            f"Message push for conversation {event.conversation_id}: "
            f"sent={result.sent} failed={result.failed}"
        )
        return Dispatched(result)
