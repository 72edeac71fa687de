"""
On-demand activity digest.

DigestService rolls a user's recent activity into a single push:
unread notifications and new posts from followed accounts over a
trailing window (DIGEST_WINDOW_HOURS, default 24).

Usage:
    from notifications.digest import DigestService

    result = DigestService.send_digest(user_id)
    if not result:
        return Response(result.to_response(), status=404)
    outcome = result.data  # DigestOutcome
"""

from __future__ import annotations

from datetime import datetime, timedelta
from uuid import UUID

from django.conf import settings
from django.utils import timezone

from core.services import BaseService, ServiceResult

from notifications.composer import compose_digest
from notifications.push import PushDispatcher
from notifications.recipients import RecipientStore
from notifications.types import DigestOutcome


DEFAULT_DIGEST_WINDOW_HOURS = 24
NO_UNREAD_REASON = "no_unread"


class DigestService(BaseService):
    """Builds and sends activity digests."""

    @classmethod
    def window_start(cls, now: datetime | None = None) -> datetime:
        """Return the start of the digest window ending at now."""
        hours = getattr(settings, "DIGEST_WINDOW_HOURS", DEFAULT_DIGEST_WINDOW_HOURS)
        return (now or timezone.now()) - timedelta(hours=hours)

    @classmethod
    def send_digest(cls, user_id: UUID) -> ServiceResult[DigestOutcome]:
        """
        Send a digest push to a user.

        Args:
            user_id: User to send the digest to

        Returns:
            ServiceResult with a DigestOutcome, or a NO_PUSH_TOKEN failure
            when the user cannot receive pushes
        """
        logger = cls.get_logger()

        profile = RecipientStore.resolve_profile(user_id)
        if profile is None or not profile.has_push_token:
            return ServiceResult.failure(
                "No push token for user",
                error_code="NO_PUSH_TOKEN",
            )

        since = cls.window_start()
        unread_count = RecipientStore.count_unread(user_id, since=since)
        if unread_count == 0:
            logger.debug(f"No unread notifications for user {user_id}, skipping digest")
            return ServiceResult.success(
                DigestOutcome(delivered=False, reason=NO_UNREAD_REASON)
            )

        new_post_count = RecipientStore.count_new_posts_from_followed(user_id, since)
        body = compose_digest(unread_count, new_post_count)

        result = PushDispatcher.dispatch(
            [profile.push_token],
            settings.PUSH_APP_NAME,
            body,
            {"type": "digest"},
        )
        logger.info(
            f"Digest for user {user_id} ({unread_count} unread, "
            f"{new_post_count} posts): sent={result.sent} failed={result.failed}"
        )
        return ServiceResult.success(
            DigestOutcome(
                delivered=True,
                result=result,
                unread_count=unread_count,
                new_post_count=new_post_count,
            )
        )
