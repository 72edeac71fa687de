"""
Recipient and counter lookups for the push pipeline.

RecipientStore is the only place the pipeline reads profiles,
participants, notifications and posts. Methods are read-only and return
empty lists, 0 or None for missing rows instead of raising.

Usage:
    from notifications.recipients import RecipientStore

    profile = RecipientStore.resolve_profile(user_id)
    participants = RecipientStore.resolve_participants(conversation_id, exclude=sender_id)
    unread = RecipientStore.count_unread(user_id)
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable
from uuid import UUID

from authentication.models import Profile
from chat.models import Participant
from core.services import BaseService
from user_posts.models import UserFollow, UserPost

from notifications.models import Notification
from notifications.types import Participation


class RecipientStore(BaseService):
    """Read-only accessors over the relational store."""

    @classmethod
    def resolve_profile(cls, user_id: UUID) -> Profile | None:
        """Return the user's profile, or None if the user has none."""
        return Profile.objects.filter(user_id=user_id).first()

    @classmethod
    def resolve_participants(
        cls,
        conversation_id: UUID,
        exclude: UUID | None = None,
    ) -> list[Participation]:
        """
        Return active participants of a conversation.

        Args:
            conversation_id: Conversation to read
            exclude: User to leave out (the sender)
        """
        queryset = Participant.objects.filter(
            conversation_id=conversation_id,
            left_at__isnull=True,
        )
        if exclude is not None:
            queryset = queryset.exclude(user_id=exclude)

        return [
            Participation(user_id=user_id, is_muted=is_muted)
            for user_id, is_muted in queryset.values_list("user_id", "is_muted")
        ]

    @classmethod
    def resolve_profiles_with_tokens(cls, user_ids: Iterable[UUID]) -> list[Profile]:
        """Return profiles of the given users that carry a non-empty push token."""
        user_ids = list(user_ids)
        if not user_ids:
            return []

        return list(
            Profile.objects.filter(user_id__in=user_ids, push_token__isnull=False)
            .exclude(push_token="")
            .order_by("user_id")
        )

    @classmethod
    def count_unread(cls, user_id: UUID, since: datetime | None = None) -> int:
        """Count unread notifications, optionally only those created since a time."""
        queryset = Notification.objects.filter(user_id=user_id, is_read=False)
        if since is not None:
            queryset = queryset.filter(created_at__gte=since)
        return queryset.count()

    @classmethod
    def count_new_posts_from_followed(cls, user_id: UUID, since: datetime) -> int:
        """
        Count posts created since a time by accounts the user follows.

        Returns 0 without querying posts when the user follows nobody.
        """
        followed = list(
            UserFollow.objects.filter(follower_id=user_id).values_list(
                "following_id", flat=True
            )
        )
        if not followed:
            return 0

        return UserPost.objects.filter(
            user_id__in=followed,
            created_at__gte=since,
        ).count()

    @classmethod
    def resolve_display_name(cls, user_id: UUID | None) -> str | None:
        """Return the user's display name, or None when unknown or blank."""
        if user_id is None:
            return None

        name = (
            Profile.objects.filter(user_id=user_id)
            .values_list("display_name", flat=True)
            .first()
        )
        return name or None
