"""
Celery tasks for scheduled digests.

Tasks:
    send_digest_notification: Send the activity digest to one user
    send_daily_digests: Enqueue a digest for every user with a push token

Design:
    - Tasks receive user ids as strings (JSON-serializable)
    - send_daily_digests runs daily from CELERY_BEAT_SCHEDULE
    - Each digest is its own task, so one slow user never delays the rest

Usage:
    from notifications.tasks import send_digest_notification

    send_digest_notification.delay(user_id=str(user.id))
"""

from __future__ import annotations

import logging

from celery import shared_task

from authentication.models import Profile

from notifications.digest import DigestService

logger = logging.getLogger(__name__)


@shared_task
def send_digest_notification(user_id: str) -> dict:
    """
    Send the activity digest to one user.

    Args:
        user_id: UUID string of the user

    Returns:
        Serialized digest outcome, or the error when the user has no token
    """
    result = DigestService.send_digest(user_id)
    if not result:
        logger.info(f"Digest not sent to user {user_id}: {result.error}")
        return result.to_response()

    outcome = result.data.to_dict()
    logger.info(f"Digest for user {user_id}: {outcome}")
    return outcome


@shared_task
def send_daily_digests() -> int:
    """
    Enqueue a digest for every active user with a push token.

    Returns:
        Number of digest tasks enqueued
    """
    user_ids = (
        Profile.objects.filter(user__is_active=True, push_token__isnull=False)
        .exclude(push_token="")
        .values_list("user_id", flat=True)
    )

    count = 0
    for user_id in user_ids.iterator():
        send_digest_notification.delay(str(user_id))
        count += 1

    logger.info(f"Enqueued {count} daily digest(s)")
    return count
