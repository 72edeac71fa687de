"""
Direct push service layer.

PushService sends caller-composed pushes to users by id, bypassing the
event pipeline and its preference gate. It backs the authenticated
push/ and push/batch/ endpoints.

Design Principles:
    - Services are stateless (use class methods)
    - Expected failures return ServiceResult.failure()
    - Provider failures are reported in DispatchResult.failed, never raised

Usage:
    from notifications.services import PushService

    result = PushService.send_to_user(user_id, "Order ready", "Table 4 is up")
    if result:
        print(result.data.to_dict())  # {"sent": 1, "failed": 0}

    result = PushService.send_to_users(user_ids, "Kitchen closing", "Last call at 10pm")
"""

from __future__ import annotations

from typing import Any, Iterable
from uuid import UUID

from core.services import BaseService, ServiceResult

from notifications.push import PushDispatcher
from notifications.recipients import RecipientStore
from notifications.types import DispatchResult


class PushService(BaseService):
    """Sends pushes to explicitly addressed users."""

    @classmethod
    def send_to_user(
        cls,
        user_id: UUID,
        title: str,
        body: str,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult[DispatchResult]:
        """
        Send a push to one user's device.

        Returns:
            ServiceResult with the DispatchResult, or a NO_PUSH_TOKEN
            failure when the user has no token
        """
        profile = RecipientStore.resolve_profile(user_id)
        if profile is None or not profile.has_push_token:
            return ServiceResult.failure(
                "No push token for user",
                error_code="NO_PUSH_TOKEN",
            )

        result = PushDispatcher.dispatch([profile.push_token], title, body, data)
        cls.get_logger().info(
            f"Direct push to user {user_id}: sent={result.sent} failed={result.failed}"
        )
        return ServiceResult.success(result)

    @classmethod
    def send_to_users(
        cls,
        user_ids: Iterable[UUID],
        title: str,
        body: str,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult[DispatchResult]:
        """
        Send the same push to every listed user that has a token.

        Users without a token are ignored; when nobody has one no
        provider call is made and the result is {sent: 0, failed: 0}.
        """
        profiles = RecipientStore.resolve_profiles_with_tokens(user_ids)
        tokens = [profile.push_token for profile in profiles]

        result = PushDispatcher.dispatch(tokens, title, body, data)
        cls.get_logger().info(
            f"Batch push to {len(tokens)} device(s): "
            f"sent={result.sent} failed={result.failed}"
        )
        return ServiceResult.success(result)
